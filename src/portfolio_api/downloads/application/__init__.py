"""Downloads application layer."""

from portfolio_api.downloads.application.dto import (
    DownloadFailureResponse,
    DownloadSavedResponse,
    DownloadValidationFailedResponse,
)
from portfolio_api.downloads.application.services import DownloadService, IDownloadRepository

__all__ = [
    "DownloadFailureResponse",
    "DownloadSavedResponse",
    "DownloadValidationFailedResponse",
    "DownloadService",
    "IDownloadRepository",
]
