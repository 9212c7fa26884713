"""Error Handlers - JSON error envelopes for the Todo routes.

Invariants:
    - Every envelope has code, message, category, severity, path, method
    - TodoApiError → its own status; todo_id included when the store set it
    - RequestValidationError → 400 (missing/blank name, non-integer id)
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Not-found never reaches here: routes answer NotFound with an empty 404
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from todo_api.core.errors import ErrorCategory, ErrorSeverity, TodoApiError

logger = logging.getLogger(__name__)


def _request_fields(request: Request) -> dict:
    return {"path": request.url.path, "method": request.method}


def _envelope(
    request: Request,
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **_request_fields(request),
            **extra,
        },
    }


async def handle_todo_api_error(request: Request, exc: TodoApiError) -> JSONResponse:
    logger.error(
        f"{exc.code}: {exc.message}",
        extra={
            "error_code": exc.code, "todo_id": exc.context.todo_id,
            **_request_fields(request),
        },
    )
    body = exc.to_response()
    body["error"].update(_request_fields(request))
    return JSONResponse(status_code=exc.http_status, content=body)


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Rejected request: {[d['field'] for d in details]}",
        extra=_request_fields(request),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            request, "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception: {exc}",
        exc_info=True, extra=_request_fields(request),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            request, "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TodoApiError, handle_todo_api_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
