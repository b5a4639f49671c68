"""Pydantic v2 schemas for election endpoints."""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from election_api.models.base import MAX_RESOURCE_ID
from election_api.schemas.polling_station import PollingStationResponse

ElectionCategory = Literal["Municipal"]


class ElectionResponse(BaseModel):
    """Election summary returned by list and detail endpoints."""

    model_config = {"from_attributes": True}

    id: int
    name: str
    location: str
    number_of_voters: int
    category: ElectionCategory
    election_date: date
    nomination_date: date


class ElectionListResponse(BaseModel):
    """All elections known to the service."""

    elections: list[ElectionResponse]


class ElectionDetailsResponse(BaseModel):
    """An election together with its polling stations."""

    election: ElectionResponse
    polling_stations: list[PollingStationResponse]


class ElectionFixture(BaseModel):
    """Fixture record for seeding an election."""

    id: int | None = Field(default=None, ge=0, le=MAX_RESOURCE_ID)
    name: str = Field(min_length=1, max_length=500)
    location: str = Field(min_length=1, max_length=200)
    number_of_voters: int = Field(default=0, ge=0)
    category: ElectionCategory = "Municipal"
    election_date: date
    nomination_date: date

    @model_validator(mode="after")
    def check_dates(self) -> "ElectionFixture":
        if self.nomination_date > self.election_date:
            msg = "nomination_date must not be after election_date"
            raise ValueError(msg)
        return self
