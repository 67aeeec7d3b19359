# services/errors.py

from db.errors import AppError, ConstraintViolation, StorageError


class ValidationError(AppError):
    status_code = 400


class Unauthorized(AppError):
    status_code = 401


class NotFound(AppError):
    status_code = 404


class Conflict(AppError):
    status_code = 409


__all__ = [
    'AppError',
    'StorageError',
    'ConstraintViolation',
    'ValidationError',
    'Unauthorized',
    'NotFound',
    'Conflict',
]
