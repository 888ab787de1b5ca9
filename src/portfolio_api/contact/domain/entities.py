"""
Contact Domain Entities
========================

Pure Python domain entities for contact-form messages.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from portfolio_api.core import isoformat_utc


@dataclass(frozen=True)
class ContactSubmission:
    """
    A message left through the contact form.

    Records are immutable once created; ``id`` is assigned by the store.
    """

    name: str
    email: str
    subject: str
    message: str
    timestamp: datetime
    id: Optional[str] = None

    def to_response_data(self) -> dict:
        """Fields echoed back to the sender (the message body is not)."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "subject": self.subject,
            "timestamp": isoformat_utc(self.timestamp),
        }
