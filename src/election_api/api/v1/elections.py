"""Election API endpoints.

GET /elections — list elections
GET /elections/{election_id} — election detail with its polling stations
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from election_api.core.dependencies import ElectionId, get_async_session
from election_api.core.exceptions import ElectionNotFoundError
from election_api.schemas.common import ErrorResponse
from election_api.schemas.election import ElectionDetailsResponse, ElectionListResponse, ElectionResponse
from election_api.schemas.polling_station import PollingStationResponse
from election_api.services import election_service, polling_station_service

elections_router = APIRouter(prefix="/elections", tags=["elections"])


@elections_router.get("", response_model=ElectionListResponse)
async def list_elections(
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> ElectionListResponse:
    """List all elections."""
    elections = await election_service.list_elections(session)
    return ElectionListResponse(elections=[ElectionResponse.model_validate(e) for e in elections])


@elections_router.get(
    "/{election_id}",
    response_model=ElectionDetailsResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_election(
    election_id: ElectionId,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> ElectionDetailsResponse:
    """Get election detail by ID, including its polling stations."""
    try:
        election = await election_service.find_election(session, election_id)
    except ElectionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Election not found.") from e
    polling_stations = await polling_station_service.list_polling_stations_for_election(session, election_id)
    return ElectionDetailsResponse(
        election=ElectionResponse.model_validate(election),
        polling_stations=[PollingStationResponse.model_validate(ps) for ps in polling_stations],
    )
