"""
Contact Infrastructure Repositories
====================================

Beanie implementation of the contact repository interface.
"""

from dataclasses import replace

from pydantic import ValidationError

from portfolio_api.contact.application import IContactRepository
from portfolio_api.contact.domain import ContactSubmission
from portfolio_api.contact.infrastructure.models import ContactDocument
from portfolio_api.core import DatabaseUnavailableException, SchemaValidationException
from portfolio_api.infrastructure.database import DatabaseConnector, schema_error_messages


class BeanieContactRepository(IContactRepository):
    """Inserts contact messages through the shared connector."""

    def __init__(self, connector: DatabaseConnector):
        self._connector = connector

    async def add(self, submission: ContactSubmission) -> ContactSubmission:
        if not self._connector.models_initialized:
            raise DatabaseUnavailableException("Database connection is not established")

        try:
            document = ContactDocument(
                name=submission.name,
                email=submission.email,
                subject=submission.subject,
                message=submission.message,
                timestamp=submission.timestamp,
            )
            await document.insert()
        except ValidationError as e:
            raise SchemaValidationException(schema_error_messages(e)) from e

        return replace(
            submission,
            id=str(document.id),
            name=document.name,
            email=document.email,
            subject=document.subject,
            message=document.message,
        )
