"""Base service exceptions.

These exceptions are raised by the service layer and should be caught
by the API layer and converted to appropriate HTTP responses.
"""

from typing import Any


class ServiceError(Exception):
    """Base service exception.

    ``message`` is safe to show to API clients. ``details`` holds extra
    response fields (for example the offending ids).
    """

    message: str = "Service error"

    def __init__(self, message: str | None = None, **details: Any):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)


class NotFoundError(ServiceError):
    """Resource not found."""

    message = "Not found"


class ValidationError(ServiceError):
    """Validation error."""

    message = "Invalid request"


class ConflictError(ServiceError):
    """Resource already exists."""

    message = "Conflict"
