"""FastAPI dependencies resolving collaborators from application state."""

from fastapi import Request

from orgservice.db.store import DocumentStore
from orgservice.services.organizations import OrganizationService


def get_organization_service(request: Request) -> OrganizationService:
    """Organization service built by the app factory."""
    return request.app.state.organization_service


def get_store(request: Request) -> DocumentStore:
    """Document store handle built by the app factory."""
    return request.app.state.store
