"""
Connection Events
=================

pymongo reports topology and heartbeat events on its monitor threads. The
bridge hands them to the connector on the event loop.
"""

import asyncio
from typing import TYPE_CHECKING, Any, Callable

from pymongo import monitoring

if TYPE_CHECKING:
    from portfolio_api.infrastructure.database.connector import DatabaseConnector


class ConnectionEventBridge(monitoring.TopologyListener, monitoring.ServerHeartbeatListener):
    """
    Translates pymongo monitoring events into connector callbacks.

    - heartbeat failure -> ``handle_error``
    - last readable server lost -> ``handle_disconnected``
    """

    def __init__(self, connector: "DatabaseConnector", loop: asyncio.AbstractEventLoop):
        self._connector = connector
        self._loop = loop

    def _dispatch(self, callback: Callable[..., Any], *args: Any) -> None:
        if self._loop.is_closed():
            return
        self._loop.call_soon_threadsafe(callback, *args)

    # TopologyListener

    def opened(self, event: monitoring.TopologyOpenedEvent) -> None:
        pass

    def description_changed(self, event: monitoring.TopologyDescriptionChangedEvent) -> None:
        was_readable = event.previous_description.has_readable_server()
        is_readable = event.new_description.has_readable_server()
        if was_readable and not is_readable:
            self._dispatch(self._connector.handle_disconnected)

    def closed(self, event: monitoring.TopologyClosedEvent) -> None:
        pass

    # ServerHeartbeatListener

    def started(self, event: monitoring.ServerHeartbeatStartedEvent) -> None:
        pass

    def succeeded(self, event: monitoring.ServerHeartbeatSucceededEvent) -> None:
        pass

    def failed(self, event: monitoring.ServerHeartbeatFailedEvent) -> None:
        self._dispatch(self._connector.handle_error, event.reply)
