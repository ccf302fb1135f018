"""Logging setup for **bfs_crawler**.

Every module logs through a child of the ``BfsCrawler`` logger, obtained
with :func:`get_logger`::

    from bfs_crawler.logger import get_logger
    logger = get_logger("fetcher")      # -> "BfsCrawler.fetcher"

Records go to stderr (stdout carries the JSON report of ``bfs-crawler
crawl``) and, when a log file is given, to a size-rotated file as well.
The CLI calls :func:`init_logging` once its options are parsed.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Union

ROOT_NAME: Final[str] = "BfsCrawler"
DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

#: rotation policy of the optional log file
MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
LOG_BACKUPS: Final[int] = 3

LevelT = Union[int, str]
PathT = Union[str, Path]


def _build_handlers(fmt: str, log_file: Optional[PathT]) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                filename=str(log_file),
                maxBytes=MAX_LOG_BYTES,
                backupCount=LOG_BACKUPS,
                encoding="utf-8",
            )
        )
    formatter = logging.Formatter(fmt)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(
    *,
    level: LevelT = "INFO",
    log_file: Optional[PathT] = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """Attach handlers to the ``BfsCrawler`` logger and set its level.

    With *replace_handlers* the previous handlers are detached and closed
    first, otherwise the new ones are added next to them. The logger does
    not propagate to the root logger.
    """
    root = logging.getLogger(ROOT_NAME)
    root.setLevel(level)
    if replace_handlers:
        for old in list(root.handlers):
            root.removeHandler(old)
            old.close()
    for handler in _build_handlers(log_format, log_file):
        root.addHandler(handler)
    root.propagate = False
    return root


def init_logging(
    level: LevelT = "INFO",
    log_file: Optional[PathT] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Replace whatever handlers are installed; used by the CLI."""
    return configure(level=level, log_file=log_file, log_format=log_format, replace_handlers=True)


def get_logger(suffix: Optional[str] = None) -> logging.Logger:
    """``BfsCrawler`` itself, or ``BfsCrawler.<suffix>``."""
    if not suffix:
        return logging.getLogger(ROOT_NAME)
    return logging.getLogger(f"{ROOT_NAME}.{suffix}")


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "get_logger", "DEFAULT_FORMAT"]
