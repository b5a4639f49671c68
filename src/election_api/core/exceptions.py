"""Domain exceptions raised by the data access layer.

Absence of a referenced resource and failure of the storage backend are
signalled by distinct exception types so that callers never have to infer
either one from an empty result.
"""


class NotFoundError(Exception):
    """A referenced resource does not exist."""

    resource = "Resource"

    def __init__(self, resource_id: int) -> None:
        self.resource_id = resource_id
        super().__init__(f"{self.resource} {resource_id} not found")


class ElectionNotFoundError(NotFoundError):
    """Raised when an election id does not exist in the store."""

    resource = "Election"


class PollingStationNotFoundError(NotFoundError):
    """Raised when a polling station id does not exist in the store."""

    resource = "Polling station"


class StorageError(Exception):
    """The storage backend is unreachable or failed unexpectedly."""
