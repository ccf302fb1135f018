"""bfs_crawler.aggregator: сборка итогового отчёта об обходе."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional, TypedDict

from bfs_crawler.crawler.models import CrawledPage, CrawlStats


class PageInfo(TypedDict, total=False):
    """Информация о веб-странице."""

    index: int
    url: str
    title: str
    text: str
    links: List[str]


@dataclass(slots=True)
class CrawlReport:
    """Результаты обхода: страницы в порядке обхода, счётчики и неудачные URL."""

    pages: List[PageInfo] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)
    failed_urls: List[str] = field(default_factory=list)

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(asdict(self), ensure_ascii=False, indent=2 if pretty else None)


def _page_info(page: CrawledPage) -> PageInfo:
    return {
        "index": page.index,
        "url": page.url,
        "title": page.title,
        "text": page.text,
        "links": list(page.links),
    }


def aggregate_results(pages: Iterable[CrawledPage], stats: Optional[CrawlStats] = None) -> CrawlReport:
    """Собирает все части отчёта в CrawlReport."""
    report = CrawlReport(pages=[_page_info(p) for p in sorted(pages, key=lambda p: p.index)])
    if stats is not None:
        counters = stats.to_dict()
        report.failed_urls = list(counters.pop("failed_urls", []))
        report.stats = counters
    return report
