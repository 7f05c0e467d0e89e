"""Error taxonomy shared by the stores, services and HTTP layer."""


class WorkoutPlusError(Exception):
    """Base class for all application errors."""


class ValidationError(WorkoutPlusError):
    """Required input is missing or malformed.

    Raised before any storage access takes place.
    """


class InvalidReferenceError(WorkoutPlusError):
    """A supplied foreign id does not resolve to an existing row."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} does not exist")


class NotFoundError(WorkoutPlusError):
    """The target of a lookup, update or delete does not exist."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class StorageError(WorkoutPlusError):
    """The underlying store rejected or failed an operation.

    The original driver exception is chained as ``__cause__``.
    """
