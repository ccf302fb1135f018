# File: tests/test_html_parser.py
import pytest

import bfs_crawler.parser.html_parser as html_parser
from bfs_crawler.parser.html_parser import extract_text, extract_title, is_binary_payload


def test_title_literal_case(literal_html):
    assert extract_title(literal_html.encode()) == "Hi"


def test_text_literal_case(literal_html):
    assert extract_text(literal_html.encode()) == "Hello World"


def test_title_missing():
    assert extract_title(b"<html><body>no title</body></html>") == ""


def test_first_non_empty_title_wins():
    html = "<title></title><body><svg><title>Icon</title></svg><title>Late</title></body>"
    assert extract_title(html) == "Icon"


def test_text_skips_comments_styles_and_doctype():
    html = """<!DOCTYPE html>
    <html><head><style>p { color: red }</style></head>
    <body>
      <!-- hidden comment -->
      <h1>  Header </h1>
      <div>first<span>   </span>second</div>
      <script type="text/javascript">var a = "<b>no</b>";</script>
    </body></html>"""
    assert extract_text(html) == "Header first second"


def test_text_empty_document():
    assert extract_text(b"") == ""


@pytest.mark.parametrize(
    "payload",
    [
        b"%PDF-1.7\n<html><body>Hello</body></html>",
        "%PDF-1.4 <p>text</p>",
        b"\x89PNG\r\n\x1a\n<p>x</p>",
    ],
)
def test_binary_guard(payload):
    assert is_binary_payload(payload)
    assert extract_text(payload) == ""


def test_html_is_not_binary(literal_html):
    assert not is_binary_payload(literal_html.encode())


def test_parse_failure_is_soft(monkeypatch):
    def explode(*args, **kwargs):
        raise RuntimeError("parser crashed")

    monkeypatch.setattr(html_parser, "BeautifulSoup", explode)
    assert extract_title(b"<title>x</title>") == ""
    assert extract_text(b"<p>x</p>") == ""
