"""bfs_crawler.sink: куда уходят обработанные страницы (память, лог, MongoDB)."""

from __future__ import annotations

import logging
from typing import List, Protocol, runtime_checkable

from bfs_crawler.crawler.models import CrawledPage
from bfs_crawler.logger import get_logger

__all__ = ["PageSink", "SinkError", "MemorySink", "LogSink"]


class SinkError(RuntimeError):
    """Хранилище недоступно: sink нельзя открыть."""


@runtime_checkable
class PageSink(Protocol):
    """Получатель записей CrawledPage, по одной на каждую засчитанную страницу."""

    def handle(self, page: CrawledPage) -> None:
        ...

    def close(self) -> None:
        ...


class MemorySink:
    """Складывает записи в список; используется движком для отчёта и в тестах."""

    def __init__(self) -> None:
        self.pages: List[CrawledPage] = []

    def handle(self, page: CrawledPage) -> None:
        self.pages.append(page)

    def close(self) -> None:
        pass


class LogSink:
    """Пишет заголовок и начало текста страницы в лог проекта."""

    def __init__(self, preview_chars: int = 120, level: int = logging.DEBUG) -> None:
        self.preview_chars = preview_chars
        self.level = level
        self.logger = get_logger("sink")

    def handle(self, page: CrawledPage) -> None:
        preview = page.text[: self.preview_chars]
        self.logger.log(self.level, "Title: %s", page.title)
        self.logger.log(self.level, "Description: %s", preview)

    def close(self) -> None:
        pass
