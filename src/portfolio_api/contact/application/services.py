"""
Contact Application Services
=============================

Coordinates field validation and persistence of contact messages.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from portfolio_api.contact.domain import ContactSubmission, validate_contact
from portfolio_api.core import utcnow


# ========== Repository Interfaces (Dependency Inversion) ==========

class IContactRepository(ABC):
    """Interface for contact message storage."""

    @abstractmethod
    async def add(self, submission: ContactSubmission) -> ContactSubmission:
        """
        Persist a new message and return it with its store-assigned id.

        Raises:
            SchemaValidationException: the store rejected the record
            DatabaseUnavailableException: no usable connection
        """


# ========== Application Services ==========

class ContactService:
    """Accepts contact-form bodies."""

    def __init__(self, repository: IContactRepository):
        self._repository = repository

    async def submit(self, payload: Mapping[str, Any]) -> ContactSubmission:
        """
        Validate and store one message.

        The timestamp is always assigned here; a ``timestamp`` in the
        payload is ignored. Identical submissions produce distinct records.

        Raises:
            ValidationException: a field failed its rules; nothing is stored
        """
        form = validate_contact(payload)
        submission = ContactSubmission(
            name=form.name,
            email=form.email,
            subject=form.subject,
            message=form.message,
            timestamp=utcnow(),
        )
        return await self._repository.add(submission)
