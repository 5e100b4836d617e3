"""
FastAPI Application Entry Point.

This is the main entry point for the todo service.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from modules.backend.api import todos
from modules.backend.core.config import get_app_config, get_database_url
from modules.backend.core.database import Database
from modules.backend.core.exception_handlers import register_exception_handlers
from modules.backend.core.logging import get_logger, setup_logging
from modules.backend.core.middleware import CorsHeadersMiddleware, RequestContextMiddleware

logger = get_logger(__name__)

_app: FastAPI | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Opens the storage handle and ensures the todos table exists, unless a
    handle was supplied to create_app. The handle is closed on shutdown,
    which uvicorn triggers on SIGTERM and SIGINT.
    """
    app_config = get_app_config()
    setup_logging(level=app_config.logging.level)

    owns_database = app.state.database is None
    if owns_database:
        app.state.database = Database(
            get_database_url(),
            echo=app_config.database.echo,
        )
    database: Database = app.state.database
    await database.create_tables()

    logger.info(
        "Application starting",
        extra={
            "app_name": app_config.application.name,
            "env": app_config.application.environment,
            "database": database.url,
        },
    )
    try:
        yield
    finally:
        if owns_database:
            logger.info("Shutting down, closing database")
            await database.dispose()
            app.state.database = None
        logger.info("Application shut down")


def create_app(database: Database | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Storage handle to use instead of opening one from
            configuration. The caller keeps ownership of it.
    """
    app_settings = get_app_config().application

    app = FastAPI(
        title=app_settings.name,
        description=app_settings.description,
        version=app_settings.version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )
    app.state.database = database

    # Last added runs first: context is bound before preflights return.
    app.add_middleware(CorsHeadersMiddleware)
    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)

    app.include_router(todos.router, prefix="/todos", tags=["todos"])

    return app


def get_app() -> FastAPI:
    """
    Get the application instance (lazy initialization).

    This function creates the app on first call and caches it.
    Use this instead of importing `app` directly to avoid
    import-time configuration errors.
    """
    global _app
    if _app is None:
        _app = create_app()
    return _app


# For uvicorn: `uvicorn modules.backend.main:app`
def __getattr__(name: str) -> FastAPI:
    """Support lazy access to `app` for uvicorn compatibility."""
    if name == "app":
        return get_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
