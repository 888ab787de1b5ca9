"""Downloads infrastructure layer."""

from portfolio_api.downloads.infrastructure.models import DownloadDocument
from portfolio_api.downloads.infrastructure.repositories import BeanieDownloadRepository

__all__ = ["DownloadDocument", "BeanieDownloadRepository"]
