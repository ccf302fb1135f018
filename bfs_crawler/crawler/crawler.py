"""
Breadth-first crawl driver.

Pops URLs from the frontier, lets the visited set decide whether they are
new, fetches them through an injected Fetcher and pushes the discovered
http(s) links back to the tail of the frontier. Stops when the page budget
is spent or the frontier runs dry.
"""
from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, Optional, Sequence

from bfs_crawler.crawler.fetcher import Fetcher
from bfs_crawler.crawler.frontier import Frontier
from bfs_crawler.crawler.link_extractor import is_crawlable
from bfs_crawler.crawler.models import CrawledPage, CrawlState, CrawlStats, FetchError, PageData
from bfs_crawler.crawler.visited import VisitedSet
from bfs_crawler.logger import get_logger

if TYPE_CHECKING:
    from bfs_crawler.sink import PageSink

__all__ = ("DEFAULT_MAX_PAGES", "BfsCrawler")

DEFAULT_MAX_PAGES = 400


class BfsCrawler:
    """FIFO breadth-first crawler with a page budget.

    With ``concurrency=1`` (the default) one fetch completes, links
    included, before the next dequeue, so visitation order is exactly the
    discovery order. More workers share the same frontier and visited set;
    order is then only approximately breadth-first.
    """

    #: how long an idle worker waits for in-flight fetches to refill the frontier
    IDLE_INTERVAL: float = 0.01

    def __init__(
        self,
        fetcher: Fetcher,
        *,
        max_pages: int = DEFAULT_MAX_PAGES,
        concurrency: int = 1,
        sinks: Sequence[PageSink] = (),
        frontier: Optional[Frontier] = None,
        visited: Optional[VisitedSet] = None,
    ) -> None:
        if max_pages < 1:
            raise ValueError("max_pages must be >= 1")
        if concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        self.fetcher = fetcher
        self.max_pages = max_pages
        self.concurrency = concurrency
        self.sinks = list(sinks)
        self.frontier = frontier if frontier is not None else Frontier()
        self.visited = visited if visited is not None else VisitedSet()
        self.stats = CrawlStats()
        self.state = CrawlState.DONE
        self._in_flight = 0
        self._runs = 0
        self.logger = get_logger("crawler")

    @property
    def pages_crawled(self) -> int:
        return self.stats.pages_crawled

    async def crawl(self, seed_url: str) -> CrawlStats:
        """Run the crawl from *seed_url* until the budget or the frontier is exhausted."""
        if self._runs:
            # injected frontier/visited only seed the first run
            self.frontier = Frontier()
            self.visited = VisitedSet()
        self._runs += 1
        self.stats = CrawlStats()
        self._in_flight = 0
        self.logger.info("--- Starting crawl from %s (max %d pages) ---", seed_url, self.max_pages)
        start = time.monotonic()
        self.frontier.enqueue(seed_url)
        self.state = CrawlState.RUNNING
        workers = [asyncio.create_task(self._worker()) for _ in range(self.concurrency)]
        try:
            await asyncio.gather(*workers)
        finally:
            for w in workers:
                w.cancel()
            self.state = CrawlState.DONE
            self.stats.elapsed = time.monotonic() - start
        self.logger.info(
            "--- Crawl finished: %d pages in %.2f s, %d failed, %d still queued ---",
            self.stats.pages_crawled,
            self.stats.elapsed,
            self.stats.fetch_failures,
            self.frontier.size(),
        )
        return self.stats

    async def _worker(self) -> None:
        while self.state is CrawlState.RUNNING:
            if self.stats.pages_crawled >= self.max_pages:
                self._drain("page budget of %d reached", self.max_pages)
                break
            url = self.frontier.dequeue()
            if url is None:
                if self._in_flight:
                    await asyncio.sleep(self.IDLE_INTERVAL)
                    continue
                self._drain("frontier is empty")
                break
            if not self.visited.visit(url):
                self.stats.duplicates_skipped += 1
                continue
            self._in_flight += 1
            try:
                await self._process(url)
            finally:
                self._in_flight -= 1

    async def _process(self, url: str) -> None:
        try:
            page = await self.fetcher.fetch(url)
        except FetchError as exc:
            self.stats.fetch_failures += 1
            self.stats.failed_urls.append(url)
            self.logger.warning("Skipping %s: %s", url, exc.reason)
            return
        # another worker may have filled the budget while this fetch was running
        if self.stats.pages_crawled >= self.max_pages:
            self.logger.debug("Dropping %s, budget already spent", url)
            return
        self._schedule(page)
        index = self.stats.pages_crawled
        self.stats.pages_crawled += 1
        self.logger.info(" %d: %s", index, url)
        record = CrawledPage(index=index, url=url, title=page.title, text=page.text, links=list(page.links))
        await self._deliver(record)

    async def _deliver(self, record: CrawledPage) -> None:
        # sinks may block (database writes), keep them off the event loop
        for sink in self.sinks:
            try:
                await asyncio.to_thread(sink.handle, record)
            except Exception as exc:
                self.logger.warning("Sink %s failed on %s: %s", type(sink).__name__, record.url, exc)

    def _schedule(self, page: PageData) -> None:
        for link in page.links:
            if is_crawlable(link):
                self.frontier.enqueue(link)
                self.stats.links_enqueued += 1
            else:
                self.stats.links_filtered += 1

    def _drain(self, reason: str, *args: object) -> None:
        if self.state is CrawlState.RUNNING:
            self.state = CrawlState.DRAINING
            self.logger.debug("Draining: " + reason, *args)
