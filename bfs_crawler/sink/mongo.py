"""
MongoDB sink: one document per crawled page, upserted by URL.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson.errors import InvalidDocument
from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from bfs_crawler.crawler.models import CrawledPage
from bfs_crawler.logger import get_logger
from bfs_crawler.sink import SinkError

__all__ = ("MongoSink",)

logger = get_logger("sink.mongo")


class MongoSink:
    """Persist CrawledPage records into *collection*.

    Write failures are logged and swallowed so a flaky database never
    stops the crawl. Use :meth:`from_uri` to connect and verify the
    deployment up front.
    """

    def __init__(self, collection: Collection, client: Optional[MongoClient] = None) -> None:
        self.collection = collection
        self._client = client
        self.written = 0
        self.failed = 0

    @classmethod
    def from_uri(
        cls,
        uri: str,
        database: str = "crawler",
        collection: str = "pages",
        *,
        server_selection_timeout_ms: int = 5000,
    ) -> MongoSink:
        """Connect, ping the deployment and make sure the url index exists."""
        client: MongoClient = MongoClient(uri, serverSelectionTimeoutMS=server_selection_timeout_ms)
        try:
            client.admin.command("ping")
            coll = client[database][collection]
            coll.create_index([("url", ASCENDING)], unique=True)
        except PyMongoError as exc:
            client.close()
            raise SinkError(f"MongoDB is not reachable: {exc}") from exc
        logger.info("Connected to MongoDB, writing to %s.%s", database, collection)
        return cls(coll, client=client)

    @staticmethod
    def to_document(page: CrawledPage) -> Dict[str, Any]:
        doc = page.to_dict()
        doc["crawled_at"] = datetime.now(timezone.utc)
        return doc

    def handle(self, page: CrawledPage) -> None:
        try:
            self.collection.update_one(
                {"url": page.url},
                {"$set": self.to_document(page)},
                upsert=True,
            )
        except (PyMongoError, InvalidDocument) as exc:
            self.failed += 1
            logger.warning("Failed to store %s: %s", page.url, exc)
            return
        self.written += 1

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
