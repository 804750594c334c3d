"""FastAPI application factory.

Run with ``uvicorn orgservice.main:create_app --factory``.
"""

from fastapi import FastAPI

from orgservice.api.errors import register_exception_handlers
from orgservice.api.routes.health import router as health_router
from orgservice.api.routes.metrics import router as metrics_router
from orgservice.api.routes.organizations import router as organizations_router
from orgservice.config import Settings, get_settings
from orgservice.db.mongo import MongoDocumentStore
from orgservice.db.store import DocumentStore
from orgservice.services.organizations import OrganizationService
from orgservice.utils.logging import configure_logging

VERSION = "0.1.0"


def create_app(settings: Settings | None = None, store: DocumentStore | None = None) -> FastAPI:
    """Build the application with explicit collaborators.

    Args:
        settings: Application settings (defaults to environment)
        store: Document store (defaults to MongoDB from settings)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if store is None:
        store = MongoDocumentStore.from_settings(settings)

    app = FastAPI(title="Organization Service", version=VERSION)
    app.state.settings = settings
    app.state.store = store
    app.state.organization_service = OrganizationService(store, settings)

    register_exception_handlers(app)

    # Register routes
    app.include_router(health_router, tags=["health"])
    app.include_router(metrics_router, tags=["metrics"])
    app.include_router(organizations_router)

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {"message": "Organization Service", "version": VERSION}

    return app
