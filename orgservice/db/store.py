"""Document store protocol interface."""

from typing import Any, Protocol


class DocumentStore(Protocol):
    """Collection-oriented persistence with opaque, format-validated identifiers.

    Backends raise ``orgservice.errors.StoreError`` for any database failure.
    Filters use MongoDB equality syntax; a ``_id`` filter value is the hex
    string form of the identifier.
    """

    def find_one(self, collection: str, filter: dict[str, Any]) -> dict[str, Any] | None:
        """Find the first document matching filter.

        Args:
            collection: Collection name
            filter: Exact-match field filter

        Returns:
            Document with ``_id`` as a string, or None if not found
        """
        ...

    def insert_one(self, collection: str, document: dict[str, Any]) -> str:
        """Insert a document.

        Args:
            collection: Collection name
            document: Document body without ``_id``

        Returns:
            Generated identifier
        """
        ...

    def delete_many(self, collection: str, filter: dict[str, Any]) -> int:
        """Delete all documents matching filter.

        Args:
            collection: Collection name
            filter: Exact-match field filter

        Returns:
            Number of deleted documents
        """
        ...

    def is_valid_id(self, value: str) -> bool:
        """Check whether value is a syntactically valid identifier."""
        ...

    def ping(self) -> None:
        """Check connectivity, raising StoreError when unreachable."""
        ...
