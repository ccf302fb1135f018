"""
Visited registry: the single dedup gate for crawl work.
"""
from __future__ import annotations

import threading
from typing import Set

from bfs_crawler.crawler.link_extractor import normalize_url


class VisitedSet:
    """Thread-safe set of normalized URLs that only ever grows."""

    def __init__(self) -> None:
        self._seen: Set[str] = set()
        self._lock = threading.Lock()

    def visit(self, url: str) -> bool:
        """
        Mark *url* as visited.

        Returns True only for the first call with a given normalized key,
        i.e. when the caller should go on and crawl it.
        """
        key = normalize_url(url)
        with self._lock:
            if key in self._seen:
                return False
            self._seen.add(key)
            return True

    def __contains__(self, url: object) -> bool:
        if not isinstance(url, str):
            return False
        key = normalize_url(url)
        with self._lock:
            return key in self._seen

    def __len__(self) -> int:
        with self._lock:
            return len(self._seen)
