"""
Contact Infrastructure Models
==============================

Beanie document for the "contacts" collection. Field constraints are
enforced again here, at write time.
"""

from datetime import datetime
from typing import Annotated

from beanie import Document
from pydantic import Field, StringConstraints

from portfolio_api.config import CONTACTS_COLLECTION
from portfolio_api.core import utcnow
from portfolio_api.shared.domain import EMAIL_PATTERN


class ContactDocument(Document):
    """Stored contact-form message."""

    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]
    email: Annotated[str, StringConstraints(strip_whitespace=True, pattern=EMAIL_PATTERN)]
    subject: Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=200)]
    message: Annotated[str, StringConstraints(strip_whitespace=True, min_length=10, max_length=5000)]
    timestamp: datetime = Field(default_factory=utcnow)

    class Settings:
        name = CONTACTS_COLLECTION
        validate_on_save = True
