# freshora/domain/errors.py
from typing import Any, List


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, errors: List[Any] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class ConflictError(AppError):
    """Unique constraint violated, e.g. a duplicate service slug."""

    status_code = 409


class InternalError(AppError):
    status_code = 500
