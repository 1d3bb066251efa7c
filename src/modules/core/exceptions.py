"""Shared API error taxonomy.

Raised by validators and services when a request cannot be honoured.
Every error carries the HTTP status and the message rendered by the
error responder (``modules.core.exception_handler``).
"""

from __future__ import annotations

from rest_framework import status


class ApiError(Exception):
    """Base error rendered as ``{"error": message}`` with ``status_code``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Something went wrong!"

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(ApiError):
    """A field or payload shape problem."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    """The route id does not match any stored entity."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ApiError):
    """A state-transition rule was violated.

    Reported as 400 to keep the public contract of the ordering API.
    """

    status_code = status.HTTP_400_BAD_REQUEST
