"""Domain exceptions raised by services and accessors.

Exception handlers in main.py translate them into the standard
error envelope: {"error": {"code": "...", "message": "..."}}.
The pagination core never catches these; they travel unchanged
up to the request boundary.
"""


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidPageRequest(DomainError):
    """Raised when a page index or page size is out of bounds."""

    def __init__(self, parameter: str, value: int, message: str) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__(message)


class AccessorUnavailable(DomainError):
    """Raised when the store behind a collection accessor cannot be reached."""

    def __init__(self, collection: str, message: str | None = None) -> None:
        self.collection = collection
        super().__init__(message or f"{collection} store is unavailable")


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with id {identifier} not found")


class ConflictError(DomainError):
    """Raised when an operation conflicts with existing state (e.g. duplicate)."""
