"""Models package - re-exports for convenience."""

from orgservice.models.organization import CreateIntent, Organization
from orgservice.models.user import User

__all__ = [
    "CreateIntent",
    "Organization",
    "User",
]
