"""
Frontier: the FIFO of URLs waiting to be fetched.
"""
from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Iterable, List, Optional


class Frontier:
    """
    Lock-guarded FIFO of raw URL strings.

    No duplicate suppression happens here; the visited set takes care of
    that after dequeue. Every method holds the lock only for its own
    duration, so size() may already be stale when the caller acts on it.
    """

    def __init__(self, urls: Iterable[str] = ()) -> None:
        self._elements: Deque[str] = deque(urls)
        self._lock = threading.Lock()

    def enqueue(self, url: str) -> None:
        with self._lock:
            self._elements.append(url)

    def dequeue(self) -> Optional[str]:
        """Pop the head, or return None when the frontier is empty."""
        with self._lock:
            if not self._elements:
                return None
            return self._elements.popleft()

    def size(self) -> int:
        with self._lock:
            return len(self._elements)

    def snapshot(self) -> List[str]:
        """Copy of the pending URLs in visitation order."""
        with self._lock:
            return list(self._elements)

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self.size() > 0
