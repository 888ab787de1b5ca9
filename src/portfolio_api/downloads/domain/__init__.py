"""Downloads domain layer."""

from portfolio_api.downloads.domain.entities import DownloadRequest
from portfolio_api.downloads.domain.validation import DownloadForm, validate_download

__all__ = ["DownloadRequest", "DownloadForm", "validate_download"]
