"""
Core Module
============

Shared core utilities and abstractions used across the application.

This module contains framework-agnostic code that defines the fundamental
building blocks of the system.
"""

from portfolio_api.core.clock import isoformat_utc, utcnow
from portfolio_api.core.exceptions import (
    ApplicationException,
    ValidationException,
    MalformedBodyException,
    RepositoryException,
    SchemaValidationException,
    DatabaseUnavailableException,
    RateLimitExceededException,
)

__all__ = [
    "ApplicationException",
    "ValidationException",
    "MalformedBodyException",
    "RepositoryException",
    "SchemaValidationException",
    "DatabaseUnavailableException",
    "RateLimitExceededException",
    "isoformat_utc",
    "utcnow",
]
