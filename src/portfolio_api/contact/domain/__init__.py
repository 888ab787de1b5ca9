"""
Contact Domain Layer
====================

Entities and field rules. No infrastructure dependencies.
"""

from portfolio_api.contact.domain.entities import ContactSubmission
from portfolio_api.contact.domain.validation import ContactForm, validate_contact

__all__ = ["ContactSubmission", "ContactForm", "validate_contact"]
