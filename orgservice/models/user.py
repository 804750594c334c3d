"""User domain model (owned by the user collaborator, read-only here)."""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """User document as stored in the users collection."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(None, alias="_id")
    email: str
    is_verified: bool = False
    deactivated: bool = False
