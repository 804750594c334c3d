"""Health check endpoints.

- /health: liveness, always 200 while the process runs
- /healthz: readiness, pings the document store
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from orgservice.api.dependencies import get_store
from orgservice.db.store import DocumentStore
from orgservice.errors import StoreError

logger = logging.getLogger(__name__)

router = APIRouter()


async def check_store(store: DocumentStore) -> tuple[bool, str]:
    """Check document store connectivity.

    The ping is blocking and runs in the threadpool.

    Returns:
        (is_ok, status_message)
    """
    try:
        await run_in_threadpool(store.ping)
        return (True, "ok")
    except StoreError as e:
        cause = e.__cause__ or e
        logger.warning("Document store health check failed: %s", cause)
        return (False, f"error: {type(cause).__name__}")


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz(
    store: Annotated[DocumentStore, Depends(get_store)],
) -> dict[str, Any] | JSONResponse:
    """Readiness check.

    Returns:
        200 with component status if the store is reachable
        503 otherwise
    """
    store_ok, store_status = await check_store(store)

    response_body = {
        "status": "ok" if store_ok else "degraded",
        "components": {
            "store": store_status,
        },
    }

    if not store_ok:
        return JSONResponse(content=response_body, status_code=503)

    return response_body
