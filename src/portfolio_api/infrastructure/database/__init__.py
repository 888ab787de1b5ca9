"""
Database Infrastructure
=======================

Manages the MongoDB connection lifecycle.

Uses Motor for async MongoDB access and Beanie as the document mapper.
"""

from fastapi import Request

from portfolio_api.infrastructure.database.connector import ConnectionState, DatabaseConnector
from portfolio_api.infrastructure.database.errors import schema_error_messages
from portfolio_api.infrastructure.database.events import ConnectionEventBridge
from portfolio_api.infrastructure.database.scheduler import ReconnectScheduler


def get_database_connector(request: Request) -> DatabaseConnector:
    """
    FastAPI dependency returning the app's connector.

    Usage:
        async def endpoint(connector: DatabaseConnector = Depends(get_database_connector)):
            ...
    """
    return request.app.state.database


__all__ = [
    "ConnectionState",
    "DatabaseConnector",
    "ConnectionEventBridge",
    "ReconnectScheduler",
    "get_database_connector",
    "schema_error_messages",
]
