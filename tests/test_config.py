# File: tests/test_config.py
import json
import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from bfs_crawler.config import CrawlerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("seed_url: http://example.com", ".yaml", None),
        (json.dumps({"seed_url": "http://example.com"}), ".json", None),
        ("{}", ".yaml", ValidationError),
        ("- a\n- b", ".yaml", TypeError),
        ("seed_url: [unclosed", ".yml", ValueError),
        ("{not json", ".json", ValueError),
        ("seed_url = 'x'", ".toml", ValueError),
    ],
)
def test_load_config_variants(clean_env, content, suffix, expect_exc):
    cfg_path = write_file(clean_env, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert str(cfg.seed_url).rstrip("/") == "http://example.com"
        assert cfg.max_pages == 400
        assert cfg.concurrency == 1
        assert cfg.timeout is None
        assert cfg.mongodb_uri is None


def test_explicit_missing_file(clean_env):
    with pytest.raises(FileNotFoundError):
        load_config(clean_env / "nope.yaml")


def test_default_file_is_used(clean_env):
    (clean_env / "configs").mkdir()
    (clean_env / "configs" / "default.yaml").write_text(
        "seed_url: https://default.test/\nmax_pages: 7\n", encoding="utf-8"
    )
    cfg = load_config()
    assert str(cfg.seed_url) == "https://default.test/"
    assert cfg.max_pages == 7


def test_overrides_without_file(clean_env):
    cfg = load_config(None, seed_url="https://x.test/", max_pages=3, concurrency=None)
    assert str(cfg.seed_url) == "https://x.test/"
    assert cfg.max_pages == 3
    assert cfg.concurrency == 1


def test_no_file_and_no_seed(clean_env):
    with pytest.raises(ValidationError):
        load_config()


@pytest.mark.parametrize(
    "field,value",
    [("max_pages", 0), ("concurrency", 0), ("timeout", 0), ("user_agent", ""), ("unknown", 1)],
)
def test_invalid_values(clean_env, field, value):
    with pytest.raises(ValidationError):
        CrawlerConfig(seed_url="https://x.test/", **{field: value})


def test_seed_must_be_http(clean_env):
    with pytest.raises(ValidationError):
        load_config(None, seed_url="ftp://x.test/")


def test_mongodb_uri_from_environment(clean_env, monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "mongodb://env:27017")
    cfg = load_config(None, seed_url="https://x.test/")
    assert cfg.mongodb_uri == "mongodb://env:27017"


def test_mongodb_uri_from_dotenv(clean_env):
    (clean_env / ".env").write_text("MONGODB_URI=mongodb://dotenv:27017\n", encoding="utf-8")
    try:
        cfg = load_config(None, seed_url="https://x.test/")
        assert cfg.mongodb_uri == "mongodb://dotenv:27017"
    finally:
        os.environ.pop("MONGODB_URI", None)


def test_file_value_wins_over_environment(clean_env, monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "mongodb://env:27017")
    path = write_file(clean_env, "seed_url: https://x.test/\nmongodb_uri: mongodb://file:27017\n", ".yaml")
    assert load_config(path).mongodb_uri == "mongodb://file:27017"


def test_config_is_frozen(clean_env):
    cfg = load_config(None, seed_url="https://x.test/")
    with pytest.raises(ValidationError):
        cfg.max_pages = 5
