"""Unit tests for the MongoDB document store against a mocked database."""

from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from orgservice.config import Settings
from orgservice.db.mongo import MongoDocumentStore, create_client_from_settings
from orgservice.errors import StoreError


@pytest.fixture
def collection() -> MagicMock:
    """Mocked pymongo collection."""
    return MagicMock()


@pytest.fixture
def store(collection: MagicMock) -> MongoDocumentStore:
    """Store over a mocked database returning the mocked collection."""
    database = MagicMock()
    database.__getitem__.return_value = collection
    return MongoDocumentStore(database)


def test_find_one_converts_id_filter_and_result(
    store: MongoDocumentStore, collection: MagicMock
) -> None:
    """Test that string ids are converted both ways."""
    oid = ObjectId()
    collection.find_one.return_value = {"_id": oid, "creator_email": "a@example.com"}

    document = store.find_one("organizations", {"_id": str(oid)})

    collection.find_one.assert_called_once_with({"_id": oid})
    assert document == {"_id": str(oid), "creator_email": "a@example.com"}


def test_find_one_passes_field_filters_through(
    store: MongoDocumentStore, collection: MagicMock
) -> None:
    """Test that non-id filters are sent unchanged."""
    collection.find_one.return_value = None

    assert store.find_one("users", {"email": "a@example.com"}) is None
    collection.find_one.assert_called_once_with({"email": "a@example.com"})


def test_insert_one_returns_string_id_without_mutating_input(
    store: MongoDocumentStore, collection: MagicMock
) -> None:
    """Test that the caller's document is not given an _id."""
    oid = ObjectId()
    collection.insert_one.return_value = MagicMock(inserted_id=oid)
    document = {"creator_email": "a@example.com"}

    doc_id = store.insert_one("organizations", document)

    assert doc_id == str(oid)
    assert document == {"creator_email": "a@example.com"}


def test_delete_many_returns_count(store: MongoDocumentStore, collection: MagicMock) -> None:
    """Test deleted count passthrough."""
    collection.delete_many.return_value = MagicMock(deleted_count=3)

    assert store.delete_many("users", {"email": "a@example.com"}) == 3


@pytest.mark.parametrize("method", ["find_one", "insert_one", "delete_many"])
def test_driver_errors_become_store_errors(
    store: MongoDocumentStore, collection: MagicMock, method: str
) -> None:
    """Test that pymongo failures surface as StoreError."""
    getattr(collection, method).side_effect = ServerSelectionTimeoutError("no servers")

    with pytest.raises(StoreError) as exc_info:
        getattr(store, method)("users", {"email": "a@example.com"})

    assert isinstance(exc_info.value.__cause__, ServerSelectionTimeoutError)


def test_ping_failure_raises_store_error() -> None:
    """Test that an unreachable server fails the ping."""
    database = MagicMock()
    database.command.side_effect = ServerSelectionTimeoutError("no servers")

    with pytest.raises(StoreError):
        MongoDocumentStore(database).ping()


def test_create_client_requires_url() -> None:
    """Test that an empty MONGO_URL is rejected."""
    with pytest.raises(ValueError, match="MONGO_URL must be set"):
        create_client_from_settings(Settings(mongo_url=""))
