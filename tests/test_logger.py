# File: tests/test_logger.py
import logging
import sys

import pytest

from bfs_crawler.logger import configure, get_logger, init_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    init_logging()


def test_child_loggers_share_project_root():
    assert get_logger().name == "BfsCrawler"
    assert get_logger("fetcher").name == "BfsCrawler.fetcher"
    assert get_logger("fetcher").parent is get_logger()


def test_console_handler_writes_to_stderr():
    root = init_logging(level="DEBUG")
    [handler] = root.handlers
    assert handler.stream is sys.stderr
    assert root.level == logging.DEBUG
    assert root.propagate is False


def test_log_file_receives_child_records(tmp_path):
    log_file = tmp_path / "crawl.log"
    init_logging(level="INFO", log_file=log_file, log_format="%(name)s %(message)s")
    get_logger("crawler").info("page %d", 7)
    for handler in get_logger().handlers:
        handler.flush()
    assert log_file.read_text(encoding="utf-8").strip() == "BfsCrawler.crawler page 7"


def test_configure_can_append_handlers():
    init_logging()
    root = configure(replace_handlers=False)
    assert len(root.handlers) == 2
