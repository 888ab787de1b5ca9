"""
Downloads Controllers (API Routes)
===================================
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response, status

from portfolio_api.core import ValidationException
from portfolio_api.downloads.application import (
    DownloadFailureResponse,
    DownloadSavedResponse,
    DownloadService,
    DownloadValidationFailedResponse,
    IDownloadRepository,
)
from portfolio_api.downloads.infrastructure import BeanieDownloadRepository
from portfolio_api.infrastructure.database import DatabaseConnector, get_database_connector
from portfolio_api.shared.api import failure_body, json_body, request_settings, success_body
from portfolio_api.shared.infrastructure.logging import get_context_logger

router = APIRouter(prefix="/api", tags=["Downloads"])


# ========== Dependencies ==========

def get_download_repository(
    connector: DatabaseConnector = Depends(get_database_connector)
) -> IDownloadRepository:
    return BeanieDownloadRepository(connector)


def get_download_service(
    repository: IDownloadRepository = Depends(get_download_repository)
) -> DownloadService:
    return DownloadService(repository)


# ========== Route Handlers ==========

@router.post(
    "/download-cv",
    status_code=status.HTTP_201_CREATED,
    summary="Record a CV download",
    responses={
        201: {"model": DownloadSavedResponse},
        400: {"model": DownloadValidationFailedResponse},
        500: {"model": DownloadFailureResponse},
    },
)
async def record_download(
    request: Request,
    response: Response,
    payload: Dict[str, Any] = Depends(json_body),
    service: DownloadService = Depends(get_download_service),
):
    logger = get_context_logger(__name__, getattr(request.state, "correlation_id", None))

    try:
        download = await service.record(payload)
    except ValidationException as e:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return failure_body(e.message, errors=e.errors)
    except Exception as e:
        # Store-level rejections land here too
        logger.error(
            "Error saving download data",
            exc_info=e,
            extra={"error": str(e), "error_type": type(e).__name__}
        )
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return failure_body(
            "Server error. Could not save download info.",
            error=e,
            expose_error_details=request_settings(request).expose_error_details,
        )

    logger.info("Download request stored", extra={"download_id": download.id})
    return success_body("Download info saved")
