"""Root API router with the configured prefix and middleware registration."""

from fastapi import APIRouter, FastAPI

from election_api.api.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware, setup_cors
from election_api.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from election_api.api.v1.elections import elections_router
    from election_api.api.v1.polling_stations import polling_stations_router

    root_router = APIRouter(prefix=settings.api_prefix)
    root_router.include_router(elections_router)
    root_router.include_router(polling_stations_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    setup_cors(app, settings)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
