# app/core/exceptions.py

from fastapi import status


class ESGConnectError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ESGConnectError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ESGConnectError):
    status_code = status.HTTP_409_CONFLICT


class PermissionDeniedError(ESGConnectError):
    status_code = status.HTTP_403_FORBIDDEN


class ValidationError(ESGConnectError):
    status_code = status.HTTP_400_BAD_REQUEST


class StoreError(ESGConnectError):
    """A database failure; carries the underlying error text."""

    def __init__(self, message: str, error: str | None = None):
        super().__init__(message)
        self.error = error
