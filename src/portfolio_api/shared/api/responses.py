"""
Response Envelope
=================

Every JSON body carries ``success`` and ``message``. Failures add either an
``errors`` list (validation) or an ``error`` string (exception text, only when
the environment allows it).
"""

from typing import Any, List, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from portfolio_api.config import Settings, get_settings


def request_settings(request: Request) -> Settings:
    """Settings attached to the running app, falling back to the global ones."""
    return getattr(request.app.state, "settings", None) or get_settings()


def success_body(message: str, data: Optional[Any] = None) -> dict:
    body: dict = {"success": True, "message": message}
    if data is not None:
        body["data"] = data
    return body


def failure_body(
    message: str,
    errors: Optional[List[Any]] = None,
    error: Optional[BaseException] = None,
    expose_error_details: bool = False,
) -> dict:
    """
    Build a failure body.

    ``error`` is only rendered when ``expose_error_details`` is set; otherwise
    the key is left out entirely.
    """
    body: dict = {"success": False, "message": message}
    if errors is not None:
        body["errors"] = errors
    if error is not None and expose_error_details:
        body["error"] = str(error)
    return body


def failure_response(
    message: str,
    status_code: int,
    errors: Optional[List[Any]] = None,
    error: Optional[BaseException] = None,
    expose_error_details: bool = False,
    headers: Optional[dict] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=failure_body(message, errors, error, expose_error_details),
        headers=headers,
    )
