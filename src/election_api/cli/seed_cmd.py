"""CLI command for loading fixture data into the database.

The ``election-api seed`` command reads a JSON fixture document of
elections and polling stations and inserts it in one transaction,
elections first.
"""

from __future__ import annotations

import asyncio
from pathlib import Path  # noqa: TC003 - Typer needs Path at runtime

import typer

from election_api.core.exceptions import StorageError
from election_api.services.fixture_service import FixtureLoadResult


def seed(
    fixture_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help='JSON file with {"elections": [...], "polling_stations": [...]}',
    ),
    create_tables: bool = typer.Option(
        False,
        "--create-tables",
        help="Create missing tables before loading (for SQLite development databases)",
    ),
) -> None:
    """Load elections and polling stations from a fixture file."""
    try:
        result = asyncio.run(_run_seed(fixture_file, create_tables=create_tables))
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except StorageError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    typer.echo(f"Loaded {result.elections} election(s) and {result.polling_stations} polling station(s)")


async def _run_seed(fixture_file: Path, *, create_tables: bool) -> FixtureLoadResult:
    """Async implementation of the seed workflow.

    Args:
        fixture_file: Path of the JSON fixture document.
        create_tables: If True, run ``create_all`` before loading.

    Returns:
        Counts of inserted records.
    """
    from election_api.core.config import get_settings
    from election_api.core.database import build_engine, build_session_factory
    from election_api.models.base import Base
    from election_api.services.fixture_service import load_fixture_file

    settings = get_settings()
    engine = build_engine(settings.database_url, echo=False, schema=settings.database_schema)

    try:
        if create_tables:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        factory = build_session_factory(engine)
        async with factory() as session:
            return await load_fixture_file(session, fixture_file)
    finally:
        await engine.dispose()
