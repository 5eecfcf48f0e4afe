"""
Application exceptions.

Every error that reaches a client is rendered as ``{"error": message}`` with
the status code carried by the exception.

Usage:
    from app.errors import ValidationError

    raise ValidationError("title required")
"""


class TripPlannerError(Exception):
    """Base exception for all API errors."""

    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(TripPlannerError, ValueError):
    """Malformed or missing request field.

    Also a ValueError so pydantic validators can raise it directly.
    """

    status_code = 400


class ForbiddenError(TripPlannerError):
    """Operation not allowed in the current mode."""

    status_code = 403


class StoreUnavailableError(TripPlannerError):
    """No backing store is configured."""

    status_code = 503


class StoreError(TripPlannerError):
    """The remote database rejected a query."""
