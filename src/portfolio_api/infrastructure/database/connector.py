"""
Database Connector
==================

Owns the process-wide MongoDB client and supervises its connection.

Lifecycle:
    disconnected -> connecting -> connected
         ^              |             |
         +-- failure ---+             |
         +------ disconnected event --+

A failed attempt schedules another one after a fixed delay. There is no
backoff growth and no attempt cap; connection failures never stop the
process.
"""

import asyncio
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from portfolio_api.config import Settings
from portfolio_api.infrastructure.database.events import ConnectionEventBridge
from portfolio_api.infrastructure.database.scheduler import ReconnectScheduler
from portfolio_api.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class ConnectionState(str, Enum):
    """Connection lifecycle states."""
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class DatabaseConnector:
    """
    Shared connection manager handed to repositories and the health check.

    Only the connector mutates connection state; everything else reads it.
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        document_models: Sequence[type] = (),
        server_selection_timeout_ms: int = 5000,
        retry_delay_seconds: float = 5.0,
        client_factory: Optional[Callable[..., Any]] = None,
        model_initializer: Optional[Callable[..., Any]] = None,
        scheduler: Optional[ReconnectScheduler] = None,
    ):
        self._uri = uri
        self._database_name = database_name
        self._document_models = list(document_models)
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self._retry_delay_seconds = retry_delay_seconds
        self._client_factory = client_factory or AsyncIOMotorClient
        self._model_initializer = model_initializer or init_beanie
        self._scheduler = scheduler or ReconnectScheduler()

        self._state = ConnectionState.DISCONNECTED
        self._client: Any = None
        self._database: Any = None
        self._models_initialized = False
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @classmethod
    def from_settings(cls, settings: Settings, document_models: Sequence[type] = ()) -> "DatabaseConnector":
        return cls(
            uri=settings.mongodb_uri,
            database_name=settings.mongodb_database,
            document_models=document_models,
            server_selection_timeout_ms=settings.server_selection_timeout_ms,
            retry_delay_seconds=settings.reconnect_delay_seconds,
        )

    # ========== State ==========

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state is ConnectionState.CONNECTED

    @property
    def models_initialized(self) -> bool:
        """True once document models are bound to a database."""
        return self._models_initialized

    @property
    def database(self) -> Any:
        return self._database

    @property
    def retry_delay_seconds(self) -> float:
        return self._retry_delay_seconds

    @property
    def host(self) -> str:
        """
        Known server addresses, comma-separated, from the non-blocking
        ``nodes`` view. ``address`` raises with several mongos routers.
        """
        nodes = getattr(self._client, "nodes", None) if self._client is not None else None
        if not nodes:
            return "unknown"
        return ",".join(f"{host}:{port}" for host, port in sorted(nodes))

    # ========== Lifecycle ==========

    async def start(self) -> None:
        """
        Start supervision.

        The first attempt runs as a scheduled job so the server can accept
        requests while the database is still unreachable.
        """
        self._loop = asyncio.get_running_loop()
        self._scheduler.start()
        self._scheduler.schedule(self.connect, 0)

    async def connect(self) -> None:
        """
        Attempt one connection.

        On failure the error is logged and another attempt is scheduled
        after the retry delay. Calls made while an attempt is in flight
        are ignored.
        """
        if self._state is ConnectionState.CONNECTING:
            logger.debug("Connection attempt already in progress")
            return

        self._state = ConnectionState.CONNECTING
        try:
            client = self._get_client()
            await client.admin.command("ping")
            if not self._models_initialized:
                await self._model_initializer(
                    database=self._database,
                    document_models=self._document_models
                )
                self._models_initialized = True
        except Exception as e:
            self._state = ConnectionState.DISCONNECTED
            logger.error(
                "MongoDB connection error",
                extra={
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "retry_in_seconds": self._retry_delay_seconds
                }
            )
            self._scheduler.schedule(self.connect, self._retry_delay_seconds)
            return

        self._state = ConnectionState.CONNECTED
        logger.info(f"MongoDB Connected: {self.host}")

    def _get_client(self) -> Any:
        if self._client is None:
            loop = self._loop or asyncio.get_running_loop()
            self._client = self._client_factory(
                self._uri,
                serverSelectionTimeoutMS=self._server_selection_timeout_ms,
                event_listeners=[ConnectionEventBridge(self, loop)],
            )
            self._database = self._client.get_default_database(self._database_name)
        return self._client

    async def close(self) -> None:
        """Stop retrying and close the client."""
        self._scheduler.cancel()
        self._scheduler.stop()

        if self._client is not None:
            self._client.close()
            self._client = None

        self._state = ConnectionState.DISCONNECTED
        logger.info("MongoDB connection closed")

    # ========== Event Reactions ==========

    def handle_error(self, error: Any) -> None:
        """Log an asynchronous driver error. State is left to the disconnect path."""
        logger.error("MongoDB connection error", extra={"error": str(error)})

    def handle_disconnected(self) -> None:
        """React to losing the server: log and connect again."""
        if self._state is not ConnectionState.CONNECTED:
            return

        self._state = ConnectionState.DISCONNECTED
        logger.warning("MongoDB disconnected. Attempting to reconnect...")
        self._scheduler.schedule(self.connect, 0)
