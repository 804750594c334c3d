"""Exception handlers rendering every failure as ``{"message": ...}``."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from orgservice.errors import InternalError, ServiceError, StoreError

logger = logging.getLogger(__name__)


def message_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build the uniform error body."""
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def internal_error_response() -> JSONResponse:
    """Generic 500 carrying no internal details."""
    error = InternalError()
    return message_response(error.status_code, error.message)


async def handle_service_error(request: Request, exc: ServiceError) -> JSONResponse:
    """Render a classified service error."""
    if exc.status_code >= 500:
        logger.error("Service error on %s %s: %s", request.method, request.url.path, exc.message)
    return message_response(exc.status_code, exc.message)


async def handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
    """Render a document store failure without leaking its details."""
    logger.error(
        "Document store failure on %s %s", request.method, request.url.path, exc_info=exc
    )
    return internal_error_response()


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework errors (unknown route, wrong method) in the same shape."""
    return message_response(exc.status_code, str(exc.detail), headers=exc.headers)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for anything unclassified."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return internal_error_response()


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers to an application."""
    app.add_exception_handler(ServiceError, handle_service_error)  # type: ignore[arg-type]
    app.add_exception_handler(StoreError, handle_store_error)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
