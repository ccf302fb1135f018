"""
Data models for the bfs_crawler crawler core.
"""
from __future__ import annotations

import enum
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Union


class FetchError(Exception):
    """Raised by a fetcher when a URL cannot be turned into a page."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class CrawlState(enum.Enum):
    """Lifecycle of a single crawl run."""

    RUNNING = "running"
    DRAINING = "draining"
    DONE = "done"


@dataclass(slots=True)
class PageData:
    """Result of one fetch: raw body plus everything derived from it."""

    url: str
    content: Union[str, bytes] = b""
    links: List[str] = field(default_factory=list)
    title: str = ""
    text: str = ""


@dataclass(slots=True)
class CrawledPage:
    """What a sink receives for every page the crawler counted."""

    index: int
    url: str
    title: str
    text: str
    links: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class CrawlStats:
    """Counters collected over one crawl run."""

    pages_crawled: int = 0
    duplicates_skipped: int = 0
    fetch_failures: int = 0
    links_enqueued: int = 0
    links_filtered: int = 0
    elapsed: float = 0.0
    failed_urls: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
