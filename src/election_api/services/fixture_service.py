"""Fixture service — seed elections and polling stations with plain inserts.

Fixtures go through the same ORM models the read endpoints query, so a
seeded store is indistinguishable from one populated by any other means.
"""

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from election_api.core.database import storage_errors
from election_api.core.exceptions import StorageError
from election_api.models.election import Election
from election_api.models.polling_station import PollingStation
from election_api.schemas.election import ElectionFixture
from election_api.schemas.polling_station import PollingStationFixture


@dataclass
class FixtureLoadResult:
    """Counts of records inserted by a fixture load."""

    elections: int = 0
    polling_stations: int = 0


async def load_fixtures(
    session: AsyncSession,
    *,
    elections: Iterable[Mapping[str, Any]] = (),
    polling_stations: Iterable[Mapping[str, Any]] = (),
) -> FixtureLoadResult:
    """Validate and insert fixture records in a single transaction.

    Elections are flushed before polling stations so that stations may
    reference elections from the same load.

    Args:
        session: Database session.
        elections: Election records (see ElectionFixture).
        polling_stations: Polling station records (see PollingStationFixture).

    Returns:
        Number of inserted records per resource.

    Raises:
        ValueError: If a record is invalid or violates a constraint
            (unknown election, duplicate id or number).
        StorageError: If the store fails for any other reason.
    """
    election_rows = [Election(**ElectionFixture.model_validate(e).model_dump(exclude_none=True)) for e in elections]
    station_rows = [
        PollingStation(**PollingStationFixture.model_validate(p).model_dump(exclude_none=True))
        for p in polling_stations
    ]

    try:
        with storage_errors("loading fixtures"):
            session.add_all(election_rows)
            await session.flush()
            session.add_all(station_rows)
            await session.flush()
            await _sync_id_sequences(session)
            await session.commit()
    except StorageError as e:
        await session.rollback()
        if isinstance(e.__cause__, IntegrityError):
            msg = f"Fixture data violates a database constraint: {e.__cause__.orig}"
            raise ValueError(msg) from e
        raise

    result = FixtureLoadResult(elections=len(election_rows), polling_stations=len(station_rows))
    logger.info(f"Loaded fixtures: {result.elections} elections, {result.polling_stations} polling stations")
    return result


async def load_fixture_file(session: AsyncSession, path: Path) -> FixtureLoadResult:
    """Load fixtures from a JSON document.

    The document has the shape ``{"elections": [...], "polling_stations": [...]}``;
    either key may be omitted.

    Raises:
        ValueError: If the file is not valid JSON or has the wrong shape.
    """
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        msg = f"{path} is not valid JSON: {e}"
        raise ValueError(msg) from e
    if not isinstance(document, dict):
        msg = f"{path} must contain a JSON object with 'elections' and/or 'polling_stations'"
        raise ValueError(msg)

    logger.info(f"Loading fixtures from {path}")
    return await load_fixtures(
        session,
        elections=document.get("elections", []),
        polling_stations=document.get("polling_stations", []),
    )


async def _sync_id_sequences(session: AsyncSession) -> None:
    """Move PostgreSQL id sequences past explicitly inserted ids.

    The next generated id is ``MAX(id) + 1``, or 1 for an empty table.
    """
    if session.bind.dialect.name != "postgresql":
        return
    for table in (Election.__tablename__, PollingStation.__tablename__):
        await session.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                f"COALESCE(MAX(id), 0) + 1, false) FROM {table}"
            )
        )
