"""
Application error taxonomy.

Routers and services raise these; the handlers registered in
``menuhub.main`` turn them into ``{"message": ...}`` JSON responses.
"""
from typing import Any

from fastapi import status


class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message}


class UnauthenticatedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden: You don't have access to this restaurant"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    message = "Conflict"


class ValidationFailedError(AppError):
    """Payload or foreign-key membership violation with field-level messages."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation error"

    def __init__(self, errors: list[dict[str, str]], message: str | None = None):
        self.errors = errors
        super().__init__(message)

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationFailedError":
        return cls([{"field": field, "message": message}], message=message)

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "errors": self.errors}
