"""Todo API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly; fallback last (it matches every path)
    - The record store is created on startup and disposed on shutdown
      via the lifespan context manager, and lives on app.state
    - Swagger UI and /openapi.json exist only in the development environment;
      the fallback redirect to them is registered in every environment

Design Decisions:
    - create_app(settings) factory so tests can build non-default apps;
      the module-level `app` is what uvicorn serves
    - Single process only: the store is in-memory, a second worker would
      see a different, empty collection
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api.api.error_handlers import register_error_handlers
from todo_api.api.routes import fallback, health, todos
from todo_api.config import Settings, get_settings
from todo_api.infrastructure.observability import setup_logging
from todo_api.infrastructure.todo_store import TodoStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    app.state.todo_store = await TodoStore.open(settings.database_url)
    logger.info(f"Todo API started ({settings.environment})")
    yield
    logger.info("Todo API shutting down")
    await app.state.todo_store.close()
    app.state.todo_store = None


def create_app(settings: Settings) -> FastAPI:
    docs_url = settings.docs_url if settings.docs_enabled else None
    app = FastAPI(
        title="Todo API",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=docs_url,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
    )
    app.state.settings = settings

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(health.router)
    app.include_router(todos.router)
    # Last: matches every path
    app.include_router(fallback.build_fallback_router(settings.docs_url))

    register_error_handlers(app)
    return app


app = create_app(get_settings())
