"""API error types.

Raised by the service layer, rendered as ``{"message": ...}`` by the
exception handlers registered in ``contracting.app``.
"""


class ApiError(Exception):
    """Base error carrying an HTTP status and a display message."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(ApiError):
    """Missing required field, unknown reference or duplicate value."""

    status_code = 400


class NotFound(ApiError):
    """Unknown id on read, update or delete."""

    status_code = 404
