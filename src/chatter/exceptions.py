"""Domain exceptions raised by dependencies and services.

Exception handlers in main.py turn them into rendered error pages.
Store failures (SQLAlchemyError) are not wrapped: handlers that must
recover from them catch them directly.
"""


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a chat, tweet or comment looked up by id does not exist."""

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"Failed to load {entity} {identifier}")
