"""Organization endpoints - POST /organizations, GET /organizations/{org_id}."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from orgservice.api.dependencies import get_organization_service
from orgservice.models.organization import Organization
from orgservice.services.organizations import OrganizationService

router = APIRouter(prefix="/organizations", tags=["organizations"])


async def read_raw_body(request: Request) -> bytes:
    """Raw request payload; validation happens in the service, not in FastAPI."""
    return await request.body()


@router.post("", response_model=Organization)
def create_organization(
    raw_body: Annotated[bytes, Depends(read_raw_body)],
    service: Annotated[OrganizationService, Depends(get_organization_service)],
) -> Organization:
    """Create an organization for an existing user.

    Body: ``{"creator_email": str}``. Validation and missing-user failures
    return 400 with ``{"message": ...}``.
    """
    return service.create_from_body(raw_body)


@router.get("/{org_id}", response_model=Organization)
def get_organization(
    org_id: str,
    service: Annotated[OrganizationService, Depends(get_organization_service)],
) -> Organization:
    """Get an organization by id.

    Returns 400 for a malformed id and 404 when no organization matches.
    """
    return service.get_organization(org_id)
