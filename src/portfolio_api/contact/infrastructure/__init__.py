"""
Contact Infrastructure Layer
=============================

- Models: Beanie documents
- Repositories: data access through the shared connector
"""

from portfolio_api.contact.infrastructure.models import ContactDocument
from portfolio_api.contact.infrastructure.repositories import BeanieContactRepository

__all__ = ["ContactDocument", "BeanieContactRepository"]
