"""Domain errors raised by services and rendered by the API exception handlers"""
from fastapi import status


class AppError(RuntimeError):
    """Base class for errors that carry an HTTP status and a user-facing message."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed or missing input."""


class NotFoundError(AppError):
    """Referenced entity does not exist.

    Kept as 400 rather than 404: existing API consumers rely on it.
    """


class UnauthorizedError(AppError):
    """Missing, invalid or expired credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(AppError):
    """Authenticated, but not entitled to the resource."""

    status_code = status.HTTP_403_FORBIDDEN


class UnhandledError(AppError):
    """Unexpected persistence failure, wrapped with the operation context."""
