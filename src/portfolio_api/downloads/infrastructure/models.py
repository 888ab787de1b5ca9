"""Beanie document for the "downloads" collection."""

from datetime import datetime
from typing import Annotated

from beanie import Document
from pydantic import Field, StringConstraints

from portfolio_api.config import DOWNLOADS_COLLECTION
from portfolio_api.core import utcnow
from portfolio_api.shared.domain import EMAIL_PATTERN


class DownloadDocument(Document):
    email: Annotated[str, StringConstraints(pattern=EMAIL_PATTERN)]
    purpose: Annotated[str, StringConstraints(strip_whitespace=True, min_length=5, max_length=500)]
    timestamp: datetime = Field(default_factory=utcnow)

    class Settings:
        name = DOWNLOADS_COLLECTION
        validate_on_save = True
