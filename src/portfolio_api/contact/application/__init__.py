"""
Contact Application Layer
==========================

Contains:
- Services: validate then persist through the repository interface
- DTOs: response models for the API documentation
"""

from portfolio_api.contact.application.dto import (
    ContactCreatedResponse,
    ContactData,
    ContactFailureResponse,
    FieldErrorItem,
    SchemaRejectedResponse,
    ValidationFailedResponse,
)
from portfolio_api.contact.application.services import ContactService, IContactRepository

__all__ = [
    "ContactCreatedResponse",
    "ContactData",
    "ContactFailureResponse",
    "FieldErrorItem",
    "SchemaRejectedResponse",
    "ValidationFailedResponse",
    "ContactService",
    "IContactRepository",
]
