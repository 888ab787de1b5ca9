"""
Core Exceptions
================

Custom exceptions for the application following clean architecture principles.

These exceptions define domain-specific errors that can be caught and handled
appropriately at the application boundaries.
"""

from typing import List, Optional


class ApplicationException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationException(ApplicationException):
    """
    Request data failed field validation.

    Carries the itemized field errors returned to the client.
    """

    def __init__(self, errors: List[dict], message: str = "Validation failed"):
        self.errors = errors
        super().__init__(message, {"errors": errors})


class MalformedBodyException(ApplicationException):
    """Request body could not be decoded as JSON."""


class RepositoryException(ApplicationException):
    """Base exception for repository/data access errors."""


class SchemaValidationException(RepositoryException):
    """The document store rejected a record at the schema level."""

    def __init__(self, messages: List[str], details: Optional[dict] = None):
        self.messages = messages
        super().__init__("; ".join(messages) or "Schema validation failed", details)


class DatabaseUnavailableException(RepositoryException):
    """No usable database connection for a persistence call."""


class RateLimitExceededException(ApplicationException):
    """Client exceeded its submission quota."""

    def __init__(
        self,
        limit: int,
        retry_after: int,
        reset_at: int,
        message: str = "Too many requests, please try again later"
    ):
        self.limit = limit
        self.retry_after = retry_after
        self.reset_at = reset_at
        super().__init__(message, {"limit": limit, "retry_after": retry_after})
