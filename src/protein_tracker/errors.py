"""Error types raised by the tracker."""


class TrackerError(Exception):
    """Base class for tracker failures."""


class InvalidInputError(TrackerError, ValueError):
    """A caller-supplied value was rejected before any write."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class NotFoundError(TrackerError, LookupError):
    """The targeted record does not exist."""

    def __init__(self, entity: str, entity_id: object) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class StorageUnavailableError(TrackerError, RuntimeError):
    """The local store could not be opened, read or written."""


class NotInitializedError(TrackerError, RuntimeError):
    """The settings row is missing; the schema was not ensured first."""
