"""
Contact Interfaces Layer
========================

FastAPI route handlers for the contact module.
"""

from portfolio_api.contact.interfaces.controllers import (
    get_contact_repository,
    get_contact_service,
    router as contact_router,
)

__all__ = ["contact_router", "get_contact_repository", "get_contact_service"]
