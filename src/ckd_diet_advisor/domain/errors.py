"""Errors surfaced by the advisor services."""


class AdvisorError(Exception):
    """Base class for errors reported back to the caller."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AdvisorError):
    """Input failed structural or range validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(AdvisorError):
    """A referenced food or profile does not exist."""
