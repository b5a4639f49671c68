"""Pydantic v2 schemas for polling station endpoints."""

from typing import Literal

from pydantic import BaseModel, Field

from election_api.models.base import MAX_RESOURCE_ID

PollingStationType = Literal["FixedLocation", "Special", "Mobile"]


class PollingStationResponse(BaseModel):
    """A single polling station as returned to clients."""

    model_config = {"from_attributes": True}

    id: int
    election_id: int
    name: str
    number: int
    number_of_voters: int | None = None
    polling_station_type: PollingStationType
    street: str
    house_number: str
    house_number_addition: str | None = None
    postal_code: str
    locality: str


class PollingStationListResponse(BaseModel):
    """All polling stations belonging to one election."""

    polling_stations: list[PollingStationResponse] = Field(
        description="Polling stations ordered by number within the election",
    )


class PollingStationFixture(BaseModel):
    """Fixture record for seeding a polling station."""

    id: int | None = Field(default=None, ge=0, le=MAX_RESOURCE_ID)
    election_id: int = Field(ge=0, le=MAX_RESOURCE_ID)
    name: str = Field(min_length=1, max_length=500)
    number: int = Field(gt=0)
    number_of_voters: int | None = Field(default=None, ge=0)
    polling_station_type: PollingStationType
    street: str = Field(max_length=200)
    house_number: str = Field(max_length=20)
    house_number_addition: str | None = Field(default=None, max_length=20)
    postal_code: str = Field(max_length=10)
    locality: str = Field(max_length=200)
