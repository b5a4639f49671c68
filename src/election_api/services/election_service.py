"""Election service — read access to elections."""

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from election_api.core.database import storage_errors
from election_api.core.exceptions import ElectionNotFoundError
from election_api.models.election import Election


async def list_elections(session: AsyncSession) -> list[Election]:
    """Return all elections ordered by id.

    Args:
        session: Database session.

    Returns:
        List of all elections, possibly empty.

    Raises:
        StorageError: If the query fails.
    """
    with storage_errors("listing elections"):
        result = await session.execute(select(Election).order_by(Election.id))
        elections = list(result.scalars().all())
    logger.debug(f"Listed {len(elections)} elections")
    return elections


async def find_election(session: AsyncSession, election_id: int) -> Election:
    """Look up a single election by id.

    Args:
        session: Database session.
        election_id: The election's id.

    Returns:
        The Election.

    Raises:
        ElectionNotFoundError: If no election has this id.
        StorageError: If the query fails.
    """
    with storage_errors(f"loading election {election_id}"):
        result = await session.execute(select(Election).where(Election.id == election_id))
        election = result.scalar_one_or_none()
    if election is None:
        logger.info(f"Election {election_id} not found")
        raise ElectionNotFoundError(election_id)
    return election
