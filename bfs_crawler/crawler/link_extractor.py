"""
Link extraction and URL normalization utilities for bfs_crawler.
"""
from __future__ import annotations

from typing import List
from urllib.parse import urljoin, urlsplit, urlunsplit

from bs4.element import Tag

from bfs_crawler.parser.html_parser import Content, parse_document

__all__ = ("normalize_url", "is_crawlable", "extract_links")

_CRAWLABLE_PREFIXES = ("http://", "https://")


def normalize_url(url: str) -> str:
    """
    Drop query and fragment so the result can be used as a dedup key.

    Scheme, host and path are left as they are. A URL that cannot be
    parsed comes back unchanged.
    """
    try:
        parsed = urlsplit(url)
    except ValueError:
        return url
    return urlunsplit((parsed.scheme, parsed.netloc, parsed.path, "", ""))


def is_crawlable(link: str) -> bool:
    """Only http(s) links go into the frontier; mailto:, javascript: etc. do not."""
    return link.startswith(_CRAWLABLE_PREFIXES)


def extract_links(content: Content, base_url: str) -> List[str]:
    """
    Return every ``<a href>`` of *content* resolved against *base_url*.

    Document order is kept, duplicates included. Hrefs that cannot be
    resolved are skipped. Raises DocumentParseError if the page itself
    cannot be parsed.
    """
    soup = parse_document(content)
    links: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        try:
            links.append(urljoin(base_url, href_val.strip()))
        except ValueError:
            continue
    return links
