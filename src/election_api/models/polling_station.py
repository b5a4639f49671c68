"""PollingStation ORM model.

A polling station (stembureau) belongs to exactly one election.  Its ``id``
is unique across all elections; its ``number`` is only unique within the
election it belongs to.
"""

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from election_api.models.base import Base, IntegerIdMixin

if TYPE_CHECKING:
    from election_api.models.election import Election

POLLING_STATION_TYPES = ("FixedLocation", "Special", "Mobile")


class PollingStation(Base, IntegerIdMixin):
    """A location where votes for one election are cast and counted."""

    __tablename__ = "polling_stations"

    election_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("elections.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    number_of_voters: Mapped[int | None] = mapped_column(Integer, nullable=True)
    polling_station_type: Mapped[str] = mapped_column(String(20), nullable=False)
    street: Mapped[str] = mapped_column(String(200), nullable=False)
    house_number: Mapped[str] = mapped_column(String(20), nullable=False)
    house_number_addition: Mapped[str | None] = mapped_column(String(20), nullable=True)
    postal_code: Mapped[str] = mapped_column(String(10), nullable=False)
    locality: Mapped[str] = mapped_column(String(200), nullable=False)

    # Relationships
    election: Mapped["Election"] = relationship(back_populates="polling_stations")

    __table_args__ = (
        UniqueConstraint("election_id", "number", name="uq_polling_station_election_number"),
        CheckConstraint(
            "polling_station_type IN ('FixedLocation', 'Special', 'Mobile')",
            name="ck_polling_station_type",
        ),
        CheckConstraint("number > 0", name="ck_polling_station_number"),
        Index("idx_polling_stations_election_id", "election_id"),
    )
