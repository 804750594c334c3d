"""In-memory implementation of the document store."""

import copy
from typing import Any

from bson import ObjectId


class InMemoryDocumentStore:
    """In-memory implementation of DocumentStore.

    Identifiers are generated as ObjectIds so validation matches MongoDB.
    """

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}

    def find_one(self, collection: str, filter: dict[str, Any]) -> dict[str, Any] | None:
        """Find the first document matching filter."""
        filter = _normalize_filter(filter)
        for document in self._collections.get(collection, {}).values():
            if _matches(document, filter):
                return copy.deepcopy(document)
        return None

    def insert_one(self, collection: str, document: dict[str, Any]) -> str:
        """Insert a document and return its generated id."""
        doc_id = str(ObjectId())
        stored = copy.deepcopy(document)
        stored["_id"] = doc_id
        self._collections.setdefault(collection, {})[doc_id] = stored
        return doc_id

    def delete_many(self, collection: str, filter: dict[str, Any]) -> int:
        """Delete all documents matching filter."""
        filter = _normalize_filter(filter)
        documents = self._collections.get(collection, {})
        doomed = [doc_id for doc_id, document in documents.items() if _matches(document, filter)]
        for doc_id in doomed:
            del documents[doc_id]
        return len(doomed)

    def is_valid_id(self, value: str) -> bool:
        """Check ObjectId syntax."""
        return ObjectId.is_valid(value)

    def ping(self) -> None:
        """Always reachable."""

    def count(self, collection: str) -> int:
        """Number of documents in collection (test helper)."""
        return len(self._collections.get(collection, {}))


def _matches(document: dict[str, Any], filter: dict[str, Any]) -> bool:
    return all(key in document and document[key] == value for key, value in filter.items())


def _normalize_filter(filter: dict[str, Any]) -> dict[str, Any]:
    # ObjectId hex is case-insensitive; stored ids are lowercase
    value = filter.get("_id")
    if isinstance(value, str) and ObjectId.is_valid(value):
        return {**filter, "_id": str(ObjectId(value))}
    return filter
