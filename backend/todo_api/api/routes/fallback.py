"""Fallback Route - answers every request no other route takes.

Invariants:
    - Registered last, so it only runs when no route fully matched
    - Known path, wrong method → 405 with Allow
    - Known path plus a trailing slash → 307 to the path without it
    - Anything else → 302 to the API documentation
"""

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import RedirectResponse
from starlette.routing import Match

CATCH_ALL = "/{path:path}"
_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _routes_for(request: Request, path: str) -> tuple[bool, set[str]]:
    """Whether another route matches `path`, and the methods it accepts."""
    scope = {**request.scope, "path": path}
    found, methods = False, set()
    for route in request.app.router.routes:
        if getattr(route, "path", None) == CATCH_ALL:
            continue
        match, _ = route.matches(scope)
        if match is not Match.NONE:
            found = True
            methods |= getattr(route, "methods", None) or set()
    return found, methods


def build_fallback_router(docs_url: str) -> APIRouter:
    router = APIRouter(include_in_schema=False)

    @router.api_route(CATCH_ALL, methods=_ALL_METHODS)
    async def fallback(request: Request):
        path = request.scope["path"]
        found, methods = _routes_for(request, path)
        if found:
            return Response(
                status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
                headers={"Allow": ", ".join(sorted(methods))},
            )
        trimmed = path.rstrip("/")
        if trimmed and trimmed != path and _routes_for(request, trimmed)[0]:
            return RedirectResponse(
                str(request.url.replace(path=trimmed)),
                status_code=status.HTTP_307_TEMPORARY_REDIRECT,
            )
        return RedirectResponse(docs_url, status_code=status.HTTP_302_FOUND)

    return router
