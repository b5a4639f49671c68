"""Polling station service — scoped reads of polling stations.

Listing is scoped to a single election; lookup by id is not, since
polling station ids are unique across all elections.
"""

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from election_api.core.database import storage_errors
from election_api.core.exceptions import PollingStationNotFoundError
from election_api.models.polling_station import PollingStation


async def list_polling_stations_for_election(session: AsyncSession, election_id: int) -> list[PollingStation]:
    """Return every polling station that belongs to an election.

    Does not check that the election exists: an unknown election and an
    election without polling stations both yield an empty list.  Callers
    that must tell them apart look the election up first.

    Args:
        session: Database session.
        election_id: The election whose polling stations to list.

    Returns:
        Polling stations ordered by number, then id.

    Raises:
        StorageError: If the query fails.
    """
    with storage_errors(f"listing polling stations for election {election_id}"):
        result = await session.execute(
            select(PollingStation)
            .where(PollingStation.election_id == election_id)
            .order_by(PollingStation.number, PollingStation.id)
        )
        polling_stations = list(result.scalars().all())
    logger.debug(f"Listed {len(polling_stations)} polling stations for election {election_id}")
    return polling_stations


async def find_polling_station(session: AsyncSession, polling_station_id: int) -> PollingStation:
    """Look up a single polling station by its own id.

    Args:
        session: Database session.
        polling_station_id: The polling station's id.

    Returns:
        The PollingStation.

    Raises:
        PollingStationNotFoundError: If no polling station has this id.
        StorageError: If the query fails.
    """
    with storage_errors(f"loading polling station {polling_station_id}"):
        result = await session.execute(select(PollingStation).where(PollingStation.id == polling_station_id))
        polling_station = result.scalar_one_or_none()
    if polling_station is None:
        logger.info(f"Polling station {polling_station_id} not found")
        raise PollingStationNotFoundError(polling_station_id)
    return polling_station
