"""Shared pytest fixtures for all test suites."""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from orgservice.config import Settings
from orgservice.db.inmemory import InMemoryDocumentStore
from orgservice.main import create_app
from orgservice.services.organizations import OrganizationService

DEFAULT_USER_EMAIL = "testUser@gmail.com"


@pytest.fixture
def settings() -> Settings:
    """Settings with explicit collection names and defaults."""
    return Settings(
        mongo_db_name="orgservice_test",
        users_collection="users",
        organizations_collection="organizations",
        default_organization_name="Test Organization",
        workspace_domain="example.test",
        workspace_slug_length=8,
    )


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Empty in-memory document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def seeded_user(store: InMemoryDocumentStore, settings: Settings) -> Generator[str, None, None]:
    """Seed the default user through the store interface.

    Teardown removes the user and any organization created for it, and
    nothing else.
    """
    user_id = store.insert_one(
        settings.users_collection,
        {"email": DEFAULT_USER_EMAIL, "is_verified": True, "deactivated": False},
    )

    yield user_id

    store.delete_many(settings.organizations_collection, {"creator_email": DEFAULT_USER_EMAIL})
    store.delete_many(settings.users_collection, {"_id": user_id})


@pytest.fixture
def service(store: InMemoryDocumentStore, settings: Settings) -> OrganizationService:
    """Organization service over the in-memory store."""
    return OrganizationService(store, settings)


@pytest.fixture
def app(store: InMemoryDocumentStore, settings: Settings) -> FastAPI:
    """Application wired to the in-memory store."""
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client."""
    return TestClient(app)
