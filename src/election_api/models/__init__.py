"""ORM model registry — import all models so Alembic autogenerate discovers them."""

from election_api.models.election import Election
from election_api.models.polling_station import PollingStation

__all__ = [
    "Election",
    "PollingStation",
]
