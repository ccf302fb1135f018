"""bfs_crawler.crawler: ядро обхода в ширину (очередь, посещённые URL, загрузка, драйвер)."""

from bfs_crawler.crawler.crawler import DEFAULT_MAX_PAGES, BfsCrawler
from bfs_crawler.crawler.fetcher import Fetcher, HttpFetcher
from bfs_crawler.crawler.frontier import Frontier
from bfs_crawler.crawler.link_extractor import extract_links, is_crawlable, normalize_url
from bfs_crawler.crawler.models import CrawledPage, CrawlState, CrawlStats, FetchError, PageData
from bfs_crawler.crawler.visited import VisitedSet

__all__ = [
    "DEFAULT_MAX_PAGES",
    "BfsCrawler",
    "Fetcher",
    "HttpFetcher",
    "Frontier",
    "VisitedSet",
    "extract_links",
    "is_crawlable",
    "normalize_url",
    "CrawledPage",
    "CrawlState",
    "CrawlStats",
    "FetchError",
    "PageData",
]
