"""Election ORM model."""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from election_api.models.base import Base, IntegerIdMixin

if TYPE_CHECKING:
    from election_api.models.polling_station import PollingStation


class Election(Base, IntegerIdMixin):
    """An election administered by the electoral committee."""

    __tablename__ = "elections"

    name: Mapped[str] = mapped_column(String(500), nullable=False)
    location: Mapped[str] = mapped_column(String(200), nullable=False)
    number_of_voters: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    category: Mapped[str] = mapped_column(String(20), nullable=False, server_default="Municipal")
    election_date: Mapped[date] = mapped_column(Date, nullable=False)
    nomination_date: Mapped[date] = mapped_column(Date, nullable=False)

    # Relationships
    polling_stations: Mapped[list["PollingStation"]] = relationship(
        back_populates="election",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        CheckConstraint("category IN ('Municipal')", name="ck_election_category"),
        CheckConstraint("number_of_voters >= 0", name="ck_election_number_of_voters"),
    )
