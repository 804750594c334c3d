"""MongoDB client factory and document store."""

import logging
from typing import Any

from bson import ObjectId
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from orgservice.config import Settings
from orgservice.errors import StoreError

logger = logging.getLogger(__name__)


def create_client_from_settings(settings: Settings) -> MongoClient:
    """Create MongoDB client from settings.

    The client connects lazily; no network I/O happens here.

    Raises:
        ValueError: If MONGO_URL is unset or empty.
    """
    if not settings.mongo_url:
        raise ValueError(
            "MONGO_URL must be set to a valid connection string. "
            "Please configure the mongo_url setting."
        )

    return MongoClient(
        settings.mongo_url,
        tz_aware=True,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
    )


class MongoDocumentStore:
    """MongoDB implementation of DocumentStore."""

    def __init__(self, database: Database) -> None:
        self._db = database

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoDocumentStore":
        """Build a store bound to the configured database."""
        client = create_client_from_settings(settings)
        return cls(client[settings.mongo_db_name])

    def find_one(self, collection: str, filter: dict[str, Any]) -> dict[str, Any] | None:
        """Find the first document matching filter."""
        try:
            document = self._db[collection].find_one(_to_mongo_filter(filter))
        except PyMongoError as e:
            logger.error("find_one failed on %s: %s", collection, e)
            raise StoreError(f"find_one failed on {collection}") from e

        if document is None:
            return None

        document["_id"] = str(document["_id"])
        return document

    def insert_one(self, collection: str, document: dict[str, Any]) -> str:
        """Insert a document and return its generated id."""
        # insert_one sets _id on the dict it is given
        payload = dict(document)
        try:
            result = self._db[collection].insert_one(payload)
        except PyMongoError as e:
            logger.error("insert_one failed on %s: %s", collection, e)
            raise StoreError(f"insert_one failed on {collection}") from e

        return str(result.inserted_id)

    def delete_many(self, collection: str, filter: dict[str, Any]) -> int:
        """Delete all documents matching filter."""
        try:
            result = self._db[collection].delete_many(_to_mongo_filter(filter))
        except PyMongoError as e:
            logger.error("delete_many failed on %s: %s", collection, e)
            raise StoreError(f"delete_many failed on {collection}") from e

        return result.deleted_count

    def is_valid_id(self, value: str) -> bool:
        """Check ObjectId syntax."""
        return ObjectId.is_valid(value)

    def ping(self) -> None:
        """Run the server ping command."""
        try:
            self._db.command("ping")
        except PyMongoError as e:
            raise StoreError("ping failed") from e


def _to_mongo_filter(filter: dict[str, Any]) -> dict[str, Any]:
    mongo_filter = dict(filter)
    if isinstance(mongo_filter.get("_id"), str):
        mongo_filter["_id"] = ObjectId(mongo_filter["_id"])
    return mongo_filter
