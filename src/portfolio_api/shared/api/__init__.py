"""
Shared API Layer
================

HTTP plumbing shared by all routers.
"""

from portfolio_api.shared.api.body import json_body
from portfolio_api.shared.api.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    global_exception_handler,
    malformed_body_exception_handler,
    rate_limit_exception_handler,
)
from portfolio_api.shared.api.rate_limit import (
    SlidingWindowRateLimiter,
    enforce_contact_rate_limit,
    get_client_address,
)
from portfolio_api.shared.api.responses import (
    failure_body,
    failure_response,
    request_settings,
    success_body,
)

__all__ = [
    "json_body",
    "CorrelationIDMiddleware",
    "LoggingMiddleware",
    "SecurityHeadersMiddleware",
    "global_exception_handler",
    "malformed_body_exception_handler",
    "rate_limit_exception_handler",
    "SlidingWindowRateLimiter",
    "enforce_contact_rate_limit",
    "get_client_address",
    "failure_body",
    "failure_response",
    "request_settings",
    "success_body",
]
