"""FastAPI dependency injection for database sessions and path parameters.

Provides get_async_session, which hands each request its own session from
the factory bound to the running application, and the annotated
identifier types shared by the resource endpoints.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Path, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from election_api.models.base import MAX_RESOURCE_ID

ElectionId = Annotated[
    int,
    Path(ge=0, le=MAX_RESOURCE_ID, description="Numeric election identifier"),
]
PollingStationId = Annotated[
    int,
    Path(ge=0, le=MAX_RESOURCE_ID, description="Numeric polling station identifier"),
]


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    """Return the session factory bound to the application serving ``request``.

    Raises:
        RuntimeError: If the application has no database engine bound.
    """
    factory: async_sessionmaker[AsyncSession] | None = getattr(request.app.state, "session_factory", None)
    if factory is None:
        msg = "Database engine not initialized. Pass an engine to create_app() or run the lifespan."
        raise RuntimeError(msg)
    return factory


async def get_async_session(request: Request) -> AsyncGenerator[AsyncSession]:
    """Yield an async database session with per-request lifecycle."""
    factory = get_session_factory(request)
    async with factory() as session:
        yield session
