# File: tests/conftest.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import pytest

from bfs_crawler.crawler.models import FetchError, PageData

#: page used by the extractor tests
LITERAL_HTML = (
    "<html><head><title>Hi</title></head>"
    "<body><p>Hello <b>World</b></p><script>x=1</script></body></html>"
)


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


class FakeFetcher:
    """In-memory fetcher: *graph* maps a URL to the links found on it.

    URLs listed in *failing* (or missing from the graph) raise FetchError.
    Every call is recorded in :attr:`calls`.
    """

    def __init__(self, graph: Dict[str, List[str]], failing: Iterable[str] = ()) -> None:
        self.graph = graph
        self.failing = set(failing)
        self.calls: List[str] = []

    async def fetch(self, url: str) -> PageData:
        self.calls.append(url)
        if url in self.failing or url not in self.graph:
            raise FetchError(url, "boom")
        return PageData(url=url, content=b"<html></html>", links=list(self.graph[url]), title=f"T {url}")


@pytest.fixture()
def fake_fetcher_factory():
    def _make(graph: Dict[str, List[str]], failing: Optional[Iterable[str]] = None) -> FakeFetcher:
        return FakeFetcher(graph, failing or ())

    return _make


@pytest.fixture()
def literal_html() -> str:
    return LITERAL_HTML


@pytest.fixture()
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory without MONGODB_URI in the environment."""
    monkeypatch.delenv("MONGODB_URI", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
