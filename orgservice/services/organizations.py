"""Organization service - creation and identifier-based retrieval.

Validation always happens before the store is touched, so a rejected request
never writes anything. Store failures propagate as StoreError and are not
retried here.
"""

import secrets
import string
import time
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, TypeVar

from orgservice.config import Settings
from orgservice.db.store import DocumentStore
from orgservice.errors import NotFoundError, UserNotFoundError, ValidationError
from orgservice.models.organization import CreateIntent, Organization
from orgservice.utils.logging import StructuredOrgLogger
from orgservice.utils.metrics import PrometheusOrgMetrics
from orgservice.validation import validate_create_request

T = TypeVar("T")

_SLUG_ALPHABET = string.ascii_lowercase + string.digits


class OrganizationService:
    """Orchestrates user lookup, organization persistence and retrieval."""

    def __init__(
        self,
        store: DocumentStore,
        settings: Settings,
        *,
        event_logger: StructuredOrgLogger | None = None,
        metrics: PrometheusOrgMetrics | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize organization service.

        Args:
            store: Document store handle
            settings: Application settings (collection names, defaults)
            event_logger: Structured outcome logger
            metrics: Metrics sink
            clock: Returns the current UTC time (for testing)
        """
        self._store = store
        self._settings = settings
        self._events = event_logger or StructuredOrgLogger()
        self._metrics = metrics or PrometheusOrgMetrics()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def create_from_body(self, raw_body: bytes | None) -> Organization:
        """Validate a raw creation request body, then create the organization.

        Raises:
            ValidationError: If the body or email is malformed
        """
        try:
            intent = validate_create_request(raw_body)
        except ValidationError:
            self._reject("create", "invalid_request")
            raise

        return self.create(intent)

    def create(self, intent: CreateIntent) -> Organization:
        """Create an organization owned by an existing user.

        Args:
            intent: Validated creation request

        Returns:
            The persisted organization

        Raises:
            UserNotFoundError: If no user has the creator email
            StoreError: If the lookup or insert fails
        """
        user = self._timed(
            "find_user",
            lambda: self._store.find_one(
                self._settings.users_collection, {"email": intent.creator_email}
            ),
        )

        if user is None:
            self._reject("create", "user_not_found", creator_email=intent.creator_email)
            raise UserNotFoundError()

        now = self._clock()
        document: dict[str, Any] = {
            "creator_email": intent.creator_email,
            "creator_id": str(user["_id"]),
            "name": self._settings.default_organization_name,
            "workspace_url": self._workspace_url(),
            "created_at": now,
            "updated_at": now,
        }

        organization_id = self._timed(
            "insert_organization",
            lambda: self._store.insert_one(self._settings.organizations_collection, document),
        )

        self._metrics.inc_request("create", "success")
        self._events.log_outcome(
            "create",
            "success",
            organization_id=organization_id,
            creator_email=intent.creator_email,
        )

        return Organization(id=organization_id, **document)

    def get_organization(self, identifier: str) -> Organization:
        """Retrieve an organization by identifier.

        Args:
            identifier: Organization id as supplied by the caller

        Returns:
            The stored organization

        Raises:
            ValidationError: If identifier is not a valid store id
            NotFoundError: If no organization has that id
            StoreError: If the query fails
        """
        if not self._store.is_valid_id(identifier):
            self._reject("get", "invalid_id")
            raise ValidationError(f"invalid organization id : {identifier}")

        document = self._timed(
            "find_organization",
            lambda: self._store.find_one(
                self._settings.organizations_collection, {"_id": identifier}
            ),
        )

        if document is None:
            self._reject("get", "not_found", organization_id=identifier)
            raise NotFoundError("organization not found")

        self._metrics.inc_request("get", "success")
        return Organization.from_document(document)

    def _workspace_url(self) -> str:
        slug = "".join(
            secrets.choice(_SLUG_ALPHABET) for _ in range(self._settings.workspace_slug_length)
        )
        return f"{slug}.{self._settings.workspace_domain}"

    def _reject(self, operation: str, reason: str, **fields: str) -> None:
        self._metrics.inc_request(operation, reason)
        self._events.log_outcome(operation, "rejected", reason=reason, **fields)

    def _timed(self, operation: str, call: Callable[[], T]) -> T:
        start = time.perf_counter()
        try:
            return call()
        finally:
            self._metrics.record_store_latency(operation, (time.perf_counter() - start) * 1000)
