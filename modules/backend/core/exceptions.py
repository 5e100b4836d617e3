"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every error carries an ErrorKind tag; exception_handlers maps the kind
to an HTTP status in one place.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of failure the API can report."""

    VALIDATION = "validation"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    NOT_FOUND = "not_found"
    STORE = "store"
    INTERNAL = "internal"


class ApplicationError(Exception):
    """Base exception for all application errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str = "Internal server error") -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when client input is malformed or out of bounds."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str = "Validation failed") -> None:
        super().__init__(message)


class PayloadTooLargeError(ApplicationError):
    """Raised as soon as a request body grows past its limit."""

    kind = ErrorKind.PAYLOAD_TOO_LARGE

    def __init__(self, message: str = "Payload too large", limit: int | None = None) -> None:
        self.limit = limit
        super().__init__(message)


class NotFoundError(ApplicationError):
    """Raised when a route or resource cannot be found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message)


class DatabaseError(ApplicationError):
    """Raised when a database operation fails."""

    kind = ErrorKind.STORE

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message)
