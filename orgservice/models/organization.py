"""Organization domain models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class CreateIntent(BaseModel):
    """Validated organization creation request, ready for persistence."""

    creator_email: str


class Organization(BaseModel):
    """Persisted organization."""

    id: str
    creator_email: str
    creator_id: str | None = None
    name: str
    workspace_url: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Organization":
        """Build from a raw store document, mapping ``_id`` to ``id``."""
        data = {key: value for key, value in document.items() if key != "_id"}
        return cls(id=str(document["_id"]), **data)
