"""HTML parsing utilities for bfs_crawler.

Two derivations live here, both computed from a BeautifulSoup tree built
with the stdlib ``html.parser`` backend:

* title: text of the first ``<title>`` element, or ``""``.
* text:  flattened visible text with scripts, styles, the title and
  comment-like nodes left out.

Both are fail-soft: markup that cannot be parsed gives an empty string.
Link harvesting (:mod:`bfs_crawler.crawler.link_extractor`) goes through
:func:`parse_document` too but lets :class:`DocumentParseError` propagate,
so a broken page still fails the fetch.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from bs4 import BeautifulSoup
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction

from bfs_crawler.logger import get_logger

__all__: Sequence[str] = (
    "BINARY_SIGNATURES",
    "DocumentParseError",
    "parse_document",
    "is_binary_payload",
    "extract_title",
    "extract_text",
)

logger = get_logger("parser")

#: magic headers of payloads that are never HTML (PDF, PNG, GIF, JPEG, ZIP)
BINARY_SIGNATURES: tuple[bytes, ...] = (
    b"%PDF-",
    b"\x89PNG\r\n\x1a\n",
    b"GIF8",
    b"\xff\xd8\xff",
    b"PK\x03\x04",
)

_NON_TEXT_NODES = (Comment, CData, Declaration, Doctype, ProcessingInstruction)
_HIDDEN_TAGS = frozenset({"script", "style", "title"})

Content = Union[str, bytes]


class DocumentParseError(ValueError):
    """The payload could not be turned into a document tree."""


def parse_document(content: Content) -> BeautifulSoup:
    """Build a soup from *content*, wrapping any parser failure."""
    try:
        return BeautifulSoup(content, "html.parser")
    except Exception as exc:
        raise DocumentParseError(f"cannot parse document: {exc}") from exc


def is_binary_payload(content: Content) -> bool:
    """True when *content* starts with one of :data:`BINARY_SIGNATURES`."""
    head = content[:16]
    if isinstance(head, str):
        head = head.encode("latin-1", "replace")
    return head.startswith(BINARY_SIGNATURES)


def extract_title(content: Content) -> str:
    """Return the text of the first non-empty ``<title>``; ``""`` if none."""
    try:
        soup = parse_document(content)
    except DocumentParseError as exc:
        logger.debug("Title extraction skipped: %s", exc)
        return ""
    for tag in soup.find_all("title"):
        if tag.contents:
            return tag.get_text().strip()
    return ""


def extract_text(content: Content) -> str:
    """Flatten the visible text of *content* into one whitespace-normalised line.

    Every text node outside ``script``/``style``/``title`` subtrees is
    stripped and, if anything is left, joined with a single space.
    Binary payloads short-circuit to ``""`` before any parsing happens.
    """
    if is_binary_payload(content):
        logger.debug("Binary signature detected, text extraction skipped")
        return ""
    try:
        soup = parse_document(content)
    except DocumentParseError as exc:
        logger.debug("Text extraction skipped: %s", exc)
        return ""

    pieces: list[str] = []
    for node in soup.find_all(string=True):
        if isinstance(node, _NON_TEXT_NODES):
            continue
        if any(parent.name in _HIDDEN_TAGS for parent in node.parents):
            continue
        piece = node.strip()
        if piece:
            pieces.append(piece)
    return " ".join(pieces).strip()
