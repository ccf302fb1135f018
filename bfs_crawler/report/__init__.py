"""bfs_crawler.report: JSON- и HTML-отчёты по результатам обхода."""

from __future__ import annotations

from bfs_crawler.report.html_report import render_html
from bfs_crawler.report.json_report import render_json

__all__ = ["render_json", "render_html"]
