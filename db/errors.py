# db/errors.py


class AppError(Exception):
    """Base error carrying the HTTP status the API reports for it."""

    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {'error': self.message}


class StorageError(AppError):
    """The underlying store rejected or failed a statement."""

    status_code = 500


class ConstraintViolation(StorageError):
    """A unique, foreign key, not-null or check constraint fired."""
