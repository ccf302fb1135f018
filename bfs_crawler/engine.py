"""bfs_crawler.engine: сборка краулера из конфигурации, запуск и агрегация результатов."""

from __future__ import annotations

from typing import List, Sequence

from bfs_crawler.aggregator import CrawlReport, aggregate_results
from bfs_crawler.config import CrawlerConfig
from bfs_crawler.crawler.crawler import BfsCrawler
from bfs_crawler.crawler.fetcher import HttpFetcher
from bfs_crawler.logger import get_logger
from bfs_crawler.sink import LogSink, MemorySink, PageSink

__all__ = ["build_sinks", "start_crawl"]

logger = get_logger("engine")


def build_sinks(cfg: CrawlerConfig) -> List[PageSink]:
    """Возвращает sink'и, которые требует конфигурация (сейчас только MongoDB)."""
    sinks: List[PageSink] = []
    if cfg.mongodb_uri:
        from bfs_crawler.sink.mongo import MongoSink

        sinks.append(MongoSink.from_uri(cfg.mongodb_uri, cfg.mongodb_database, cfg.mongodb_collection))
    return sinks


async def start_crawl(cfg: CrawlerConfig, sinks: Sequence[PageSink] = ()) -> CrawlReport:
    """
    Запускает обход по конфигурации и возвращает CrawlReport.

    Помимо переданных sinks всегда подключаются MemorySink (для отчёта)
    и LogSink. Все sink'и закрываются по завершении, в том числе при ошибке.
    """
    collector = MemorySink()
    all_sinks: List[PageSink] = [collector, LogSink(), *sinks]
    logger.info("Starting crawl of %s", cfg.seed_url)
    try:
        all_sinks.extend(build_sinks(cfg))
        async with HttpFetcher(user_agent=cfg.user_agent, timeout=cfg.timeout) as fetcher:
            crawler = BfsCrawler(
                fetcher,
                max_pages=cfg.max_pages,
                concurrency=cfg.concurrency,
                sinks=all_sinks,
            )
            stats = await crawler.crawl(str(cfg.seed_url))
    finally:
        for sink in all_sinks:
            sink.close()
    return aggregate_results(collector.pages, stats)
