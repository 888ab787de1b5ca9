"""
Contact Controllers (API Routes)
=================================

FastAPI routes for the contact form.

Controllers are thin - they delegate to application services and only
classify the failures into responses.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response, status

from portfolio_api.contact.application import (
    ContactCreatedResponse,
    ContactFailureResponse,
    ContactService,
    IContactRepository,
    SchemaRejectedResponse,
    ValidationFailedResponse,
)
from portfolio_api.contact.infrastructure import BeanieContactRepository
from portfolio_api.core import SchemaValidationException, ValidationException
from portfolio_api.infrastructure.database import DatabaseConnector, get_database_connector
from portfolio_api.shared.api import (
    enforce_contact_rate_limit,
    failure_body,
    json_body,
    request_settings,
    success_body,
)
from portfolio_api.shared.infrastructure.logging import get_context_logger

router = APIRouter(prefix="/api", tags=["Contact"])


# ========== Dependencies ==========

def get_contact_repository(
    connector: DatabaseConnector = Depends(get_database_connector)
) -> IContactRepository:
    return BeanieContactRepository(connector)


def get_contact_service(
    repository: IContactRepository = Depends(get_contact_repository)
) -> ContactService:
    return ContactService(repository)


# ========== Route Handlers ==========

@router.post(
    "/contact",
    status_code=status.HTTP_201_CREATED,
    summary="Submit a contact-form message",
    dependencies=[Depends(enforce_contact_rate_limit)],
    responses={
        201: {"model": ContactCreatedResponse, "description": "Message stored"},
        400: {
            "model": ValidationFailedResponse,
            "description": "Field validation failed, or the store rejected the record "
                           "(then `errors` is a list of strings, see SchemaRejectedResponse)"
        },
        429: {"model": ContactFailureResponse, "description": "Too many submissions from this address"},
        500: {"model": ContactFailureResponse, "description": "Message could not be stored"},
    },
)
async def submit_contact(
    request: Request,
    response: Response,
    payload: Dict[str, Any] = Depends(json_body),
    service: ContactService = Depends(get_contact_service),
):
    """
    Store a message from the contact form.

    At most 10 submissions per client address in any 15 minutes.
    """
    logger = get_context_logger(__name__, getattr(request.state, "correlation_id", None))

    try:
        submission = await service.submit(payload)
    except ValidationException as e:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return failure_body(e.message, errors=e.errors)
    except SchemaValidationException as e:
        logger.error("Error saving contact", extra={"error": str(e)})
        response.status_code = status.HTTP_400_BAD_REQUEST
        return failure_body("Invalid data provided", errors=e.messages)
    except Exception as e:
        logger.error(
            "Error saving contact",
            exc_info=e,
            extra={"error": str(e), "error_type": type(e).__name__}
        )
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return failure_body(
            "Failed to save message",
            error=e,
            expose_error_details=request_settings(request).expose_error_details,
        )

    logger.info("Contact message stored", extra={"contact_id": submission.id})
    return success_body("Message sent successfully", data=submission.to_response_data())
