"""Organization creation request validation.

Turns raw request bytes into a CreateIntent. A missing ``creator_email`` key
and a malformed value are reported with the same message template; only the
interpolated value differs.
"""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from orgservice.errors import ValidationError
from orgservice.models.organization import CreateIntent

INVALID_EMAIL_TEMPLATE = "invalid email format : {value}"


class CreateOrganizationRequest(BaseModel):
    """Request body for POST /organizations."""

    creator_email: str = ""


def is_valid_email(value: str) -> bool:
    """Check standard email address syntax (no DNS lookups)."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _extract_creator_email(raw_body: bytes | None) -> str:
    """Decode the body and pull out ``creator_email``, or "" if unusable."""
    if not raw_body:
        return ""

    try:
        request = CreateOrganizationRequest.model_validate_json(raw_body)
    except (PydanticValidationError, UnicodeDecodeError):
        return ""

    return request.creator_email


def validate_create_request(raw_body: bytes | None) -> CreateIntent:
    """Validate an organization creation request body.

    Args:
        raw_body: Raw request payload, possibly empty

    Returns:
        CreateIntent holding the validated creator email

    Raises:
        ValidationError: If the body is unusable or the email is malformed
    """
    creator_email = _extract_creator_email(raw_body)

    if not is_valid_email(creator_email):
        raise ValidationError(INVALID_EMAIL_TEMPLATE.format(value=creator_email))

    return CreateIntent(creator_email=creator_email)
