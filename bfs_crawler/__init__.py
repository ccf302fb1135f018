"""
bfs_crawler package initializer.
Defines package version and exposes the crawler core and the CLI.
"""
__version__ = "0.1.0"

from bfs_crawler.crawler import BfsCrawler, Frontier, HttpFetcher, VisitedSet, normalize_url  # noqa: E402

__all__ = ["__version__", "BfsCrawler", "Frontier", "HttpFetcher", "VisitedSet", "normalize_url"]
