"""
Downloads Application Services
===============================
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from portfolio_api.core import utcnow
from portfolio_api.downloads.domain import DownloadRequest, validate_download


class IDownloadRepository(ABC):
    """Interface for download request storage."""

    @abstractmethod
    async def add(self, request: DownloadRequest) -> DownloadRequest:
        """Persist a new download request and return it with its id."""


class DownloadService:
    """Records CV download requests."""

    def __init__(self, repository: IDownloadRepository):
        self._repository = repository

    async def record(self, payload: Mapping[str, Any]) -> DownloadRequest:
        """
        Raises:
            ValidationException: email or purpose failed its rule
        """
        form = validate_download(payload)
        download = DownloadRequest(email=form.email, purpose=form.purpose, timestamp=utcnow())
        return await self._repository.add(download)
