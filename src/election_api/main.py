"""FastAPI application factory.

Creates the FastAPI app with lifespan management, exception handlers,
and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncEngine

from election_api.core.config import Settings, get_settings
from election_api.core.database import build_engine, build_session_factory
from election_api.core.exceptions import StorageError
from election_api.core.logging import setup_logging


def bind_engine(app: FastAPI, engine: AsyncEngine) -> None:
    """Attach ``engine`` and a session factory for it to ``app.state``."""
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifecycle: create an engine on startup unless one is bound, dispose it on shutdown."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, log_dir=settings.log_dir)

    owns_engine = getattr(app.state, "engine", None) is None
    if owns_engine:
        bind_engine(app, build_engine(settings.database_url, echo=False, schema=settings.database_schema))
    logger.info(f"Election API started (environment={settings.environment})")

    yield

    if owns_engine:
        await app.state.engine.dispose()
        app.state.engine = None
        app.state.session_factory = None


def create_app(settings: Settings | None = None, *, engine: AsyncEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings; loaded from the environment when omitted.
        engine: Storage handle to bind the app to.  A bound engine is
            used as-is and left open on shutdown; without one the lifespan
            creates and disposes its own from ``settings.database_url``.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="Election API",
        description="Election administration: elections and their polling stations",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = None
    app.state.session_factory = None
    if engine is not None:
        bind_engine(app, engine)

    # Register exception handlers. Anything else unexpected stays a 500.
    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(
            status_code=503,
            content={"detail": "Storage backend unavailable."},
        )

    # Register middleware and routers
    from election_api.api.router import create_router, setup_middleware

    setup_middleware(app, settings)
    app.include_router(create_router(settings))

    return app
