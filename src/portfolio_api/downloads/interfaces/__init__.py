"""Downloads interfaces layer."""

from portfolio_api.downloads.interfaces.controllers import (
    get_download_repository,
    get_download_service,
    router as downloads_router,
)

__all__ = ["downloads_router", "get_download_repository", "get_download_service"]
