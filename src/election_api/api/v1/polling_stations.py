"""Polling station API endpoints.

GET /elections/{election_id}/polling_stations — list an election's polling stations
GET /polling_stations/{polling_station_id} — polling station detail
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from election_api.core.dependencies import ElectionId, PollingStationId, get_async_session
from election_api.core.exceptions import ElectionNotFoundError, PollingStationNotFoundError
from election_api.schemas.common import ErrorResponse
from election_api.schemas.polling_station import PollingStationListResponse, PollingStationResponse
from election_api.services.election_service import find_election
from election_api.services.polling_station_service import (
    find_polling_station,
    list_polling_stations_for_election,
)

polling_stations_router = APIRouter(tags=["polling_stations"])


@polling_stations_router.get(
    "/elections/{election_id}/polling_stations",
    response_model=PollingStationListResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def list_election_polling_stations(
    election_id: ElectionId,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> PollingStationListResponse:
    """List all polling stations of an election.

    An election without polling stations yields an empty list; an unknown
    election yields 404.
    """
    try:
        await find_election(session, election_id)
    except ElectionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Election not found.") from e
    polling_stations = await list_polling_stations_for_election(session, election_id)
    return PollingStationListResponse(
        polling_stations=[PollingStationResponse.model_validate(ps) for ps in polling_stations],
    )


@polling_stations_router.get(
    "/polling_stations/{polling_station_id}",
    response_model=PollingStationResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_polling_station(
    polling_station_id: PollingStationId,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> PollingStationResponse:
    """Get a polling station by its id, regardless of election."""
    try:
        polling_station = await find_polling_station(session, polling_station_id)
    except PollingStationNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Polling station not found.") from e
    return PollingStationResponse.model_validate(polling_station)
