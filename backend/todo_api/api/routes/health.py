"""Health & Readiness Probes.

Invariants:
    - GET /health always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the record store is unreachable
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from todo_api.infrastructure.todo_store import TodoStore, get_todo_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe."""
    return {"status": "healthy", "service": "todo-api", "version": "1.0.0"}


@router.get("/ready")
async def readiness_check(store: TodoStore = Depends(get_todo_store)):
    """Readiness probe - includes record store connectivity."""
    if not await store.ping():
        logger.warning("Readiness check failed: record store unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
