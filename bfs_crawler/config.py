"""
Модуль для загрузки и валидации конфигурации краулера bfs_crawler.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from bfs_crawler.crawler.crawler import DEFAULT_MAX_PAGES
from bfs_crawler.crawler.fetcher import DEFAULT_USER_AGENT


class CrawlerConfig(BaseModel):
    """Конфигурация для одного запуска обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seed_url: HttpUrl = Field(..., description="Стартовый URL обхода.")
    max_pages: int = Field(DEFAULT_MAX_PAGES, ge=1, description="Жесткий лимит по числу страниц.")
    concurrency: int = Field(1, ge=1, description="Число параллельных воркеров (1 = строгий BFS).")
    timeout: Optional[float] = Field(
        None, gt=0, description="Таймаут на один запрос (секунд); None - без таймаута."
    )
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    mongodb_uri: Optional[str] = Field(None, description="Строка подключения к MongoDB.")
    mongodb_database: str = Field("crawler", min_length=1, description="База данных MongoDB.")
    mongodb_collection: str = Field("pages", min_length=1, description="Коллекция для страниц.")


_DEFAULT_CFG = Path("configs/default.yaml")
_MONGODB_ENV = "MONGODB_URI"


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def _read_file(path_obj: Path) -> dict[str, Any]:
    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект CrawlerConfig.

    Без path используется configs/default.yaml, если он есть; иначе конфиг
    собирается только из overrides. Явно указанный, но отсутствующий файл:
    FileNotFoundError. Значения overrides, равные None, игнорируются.
    mongodb_uri, если не задан, берётся из переменной окружения MONGODB_URI
    (в том числе из файла .env).
    """
    if path is None:
        data = _read_file(_DEFAULT_CFG) if _DEFAULT_CFG.is_file() else {}
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))
        data = _read_file(path_obj)

    data.update({k: v for k, v in overrides.items() if v is not None})

    load_dotenv(find_dotenv(usecwd=True))
    if not data.get("mongodb_uri") and os.getenv(_MONGODB_ENV):
        data["mongodb_uri"] = os.environ[_MONGODB_ENV]

    return CrawlerConfig(**data)
