"""Connection supervision: retry scheduling and event reactions."""
import logging

import pytest

from portfolio_api.infrastructure.database import (
    ConnectionEventBridge,
    ConnectionState,
    DatabaseConnector,
)


class FakeScheduler:
    def __init__(self):
        self.scheduled = []
        self.started = False
        self.cancelled = False
        self.stopped = False

    def start(self):
        self.started = True

    def schedule(self, job_func, delay_seconds):
        self.scheduled.append((job_func, delay_seconds))

    def cancel(self):
        self.cancelled = True

    def stop(self):
        self.stopped = True


class FakeAdmin:
    def __init__(self, failures):
        self.failures = failures
        self.calls = 0

    async def command(self, name):
        self.calls += 1
        if self.failures:
            raise self.failures.pop(0)
        return {"ok": 1.0}


class FakeClient:
    def __init__(self, uri, failures=None, **kwargs):
        self.uri = uri
        self.kwargs = kwargs
        self.admin = FakeAdmin(list(failures or []))
        self.nodes = frozenset({("db.internal", 27017)})
        self.closed = False
        self.default_database = None

    def get_default_database(self, name):
        self.default_database = name
        return {"name": name}

    def close(self):
        self.closed = True


class FakeInitializer:
    def __init__(self):
        self.calls = []

    async def __call__(self, database, document_models):
        self.calls.append((database, document_models))


@pytest.fixture()
def scheduler():
    return FakeScheduler()


@pytest.fixture()
def initializer():
    return FakeInitializer()


def make_connector(scheduler, initializer, failures=None):
    clients = []

    def factory(uri, **kwargs):
        client = FakeClient(uri, failures=failures, **kwargs)
        clients.append(client)
        return client

    connector = DatabaseConnector(
        uri="mongodb://db.internal:27017/portfolio",
        database_name="portfolio",
        document_models=["ContactDocument"],
        client_factory=factory,
        model_initializer=initializer,
        scheduler=scheduler,
    )
    return connector, clients


@pytest.mark.asyncio
async def test_start_schedules_immediate_attempt(scheduler, initializer):
    connector, clients = make_connector(scheduler, initializer)

    await connector.start()

    assert scheduler.started is True
    assert scheduler.scheduled == [(connector.connect, 0)]
    assert connector.state is ConnectionState.DISCONNECTED
    assert clients == []


@pytest.mark.asyncio
async def test_connect_success(scheduler, initializer, caplog):
    connector, clients = make_connector(scheduler, initializer)

    with caplog.at_level(logging.INFO):
        await connector.connect()

    assert connector.state is ConnectionState.CONNECTED
    assert connector.is_connected is True
    assert connector.models_initialized is True
    assert connector.host == "db.internal:27017"

    client = clients[0]
    assert client.kwargs["serverSelectionTimeoutMS"] == 5000
    assert isinstance(client.kwargs["event_listeners"][0], ConnectionEventBridge)
    assert client.default_database == "portfolio"
    assert initializer.calls == [({"name": "portfolio"}, ["ContactDocument"])]
    assert scheduler.scheduled == []
    assert "MongoDB Connected: db.internal:27017" in caplog.text


class ShardedClient(FakeClient):
    def __init__(self, uri, **kwargs):
        super().__init__(uri, **kwargs)
        self.nodes = frozenset({("mongos-b", 27017), ("mongos-a", 27017)})

    @property
    def address(self):
        raise RuntimeError("Cannot use \"address\" property when load balancing among mongoses")


@pytest.mark.asyncio
async def test_connect_success_with_several_mongos(scheduler, initializer, caplog):
    connector = DatabaseConnector(
        uri="mongodb://mongos-a,mongos-b/portfolio",
        database_name="portfolio",
        client_factory=ShardedClient,
        model_initializer=initializer,
        scheduler=scheduler,
    )

    with caplog.at_level(logging.INFO):
        await connector.connect()

    assert connector.is_connected is True
    assert connector.host == "mongos-a:27017,mongos-b:27017"
    assert "MongoDB Connected: mongos-a:27017,mongos-b:27017" in caplog.text


@pytest.mark.asyncio
async def test_failed_attempt_schedules_retry(scheduler, initializer, caplog):
    connector, _ = make_connector(
        scheduler, initializer, failures=[TimeoutError("server selection timed out")]
    )

    with caplog.at_level(logging.ERROR):
        await connector.connect()

    assert connector.state is ConnectionState.DISCONNECTED
    assert connector.models_initialized is False
    assert scheduler.scheduled == [(connector.connect, 5.0)]
    assert initializer.calls == []
    assert "MongoDB connection error" in caplog.text


@pytest.mark.asyncio
async def test_retries_until_success_with_fixed_delay(scheduler, initializer):
    failures = [ConnectionError("refused") for _ in range(3)]
    connector, clients = make_connector(scheduler, initializer, failures=failures)

    for _ in range(4):
        await connector.connect()

    assert connector.state is ConnectionState.CONNECTED
    assert [delay for _, delay in scheduler.scheduled] == [5.0, 5.0, 5.0]
    # One client, reused across attempts
    assert len(clients) == 1
    assert clients[0].admin.calls == 4
    assert len(initializer.calls) == 1


@pytest.mark.asyncio
async def test_retry_delay_is_configurable(initializer):
    scheduler = FakeScheduler()
    connector = DatabaseConnector(
        uri="mongodb://localhost/portfolio",
        database_name="portfolio",
        retry_delay_seconds=0.5,
        client_factory=lambda uri, **kwargs: FakeClient(uri, failures=[OSError("down")], **kwargs),
        model_initializer=initializer,
        scheduler=scheduler,
    )

    await connector.connect()

    assert scheduler.scheduled == [(connector.connect, 0.5)]


@pytest.mark.asyncio
async def test_connect_ignored_while_attempt_in_flight(scheduler, initializer):
    connector, clients = make_connector(scheduler, initializer)
    connector._state = ConnectionState.CONNECTING

    await connector.connect()

    assert clients == []
    assert connector.state is ConnectionState.CONNECTING


@pytest.mark.asyncio
async def test_disconnect_triggers_reconnect(scheduler, initializer, caplog):
    connector, _ = make_connector(scheduler, initializer)
    await connector.connect()

    with caplog.at_level(logging.WARNING):
        connector.handle_disconnected()

    assert connector.state is ConnectionState.DISCONNECTED
    assert scheduler.scheduled == [(connector.connect, 0)]
    assert "MongoDB disconnected. Attempting to reconnect..." in caplog.text

    await connector.connect()
    assert connector.is_connected is True
    assert len(initializer.calls) == 1


@pytest.mark.asyncio
async def test_disconnect_ignored_when_not_connected(scheduler, initializer):
    connector, _ = make_connector(scheduler, initializer)

    connector.handle_disconnected()

    assert scheduler.scheduled == []


@pytest.mark.asyncio
async def test_error_event_only_logs(scheduler, initializer, caplog):
    connector, _ = make_connector(scheduler, initializer)
    await connector.connect()

    with caplog.at_level(logging.ERROR):
        connector.handle_error(OSError("connection reset"))

    assert connector.state is ConnectionState.CONNECTED
    assert scheduler.scheduled == []
    assert "MongoDB connection error" in caplog.text


@pytest.mark.asyncio
async def test_close(scheduler, initializer):
    connector, clients = make_connector(scheduler, initializer)
    await connector.connect()

    await connector.close()

    assert scheduler.cancelled is True
    assert scheduler.stopped is True
    assert clients[0].closed is True
    assert connector.state is ConnectionState.DISCONNECTED


class FakeLoop:
    def __init__(self, closed=False):
        self.closed = closed
        self.calls = []

    def is_closed(self):
        return self.closed

    def call_soon_threadsafe(self, callback, *args):
        self.calls.append((callback, args))


class FakeDescription:
    def __init__(self, readable):
        self.readable = readable

    def has_readable_server(self):
        return self.readable


class FakeTopologyEvent:
    def __init__(self, was_readable, is_readable):
        self.previous_description = FakeDescription(was_readable)
        self.new_description = FakeDescription(is_readable)


class FakeHeartbeatFailure:
    def __init__(self, reply):
        self.reply = reply


class RecordingConnector:
    def handle_disconnected(self):
        pass

    def handle_error(self, error):
        pass


class TestConnectionEventBridge:

    def test_losing_readable_server_dispatches_disconnect(self):
        loop, connector = FakeLoop(), RecordingConnector()
        bridge = ConnectionEventBridge(connector, loop)

        bridge.description_changed(FakeTopologyEvent(was_readable=True, is_readable=False))

        assert loop.calls == [(connector.handle_disconnected, ())]

    @pytest.mark.parametrize("was_readable, is_readable", [(False, False), (False, True), (True, True)])
    def test_other_transitions_are_ignored(self, was_readable, is_readable):
        loop = FakeLoop()
        bridge = ConnectionEventBridge(RecordingConnector(), loop)

        bridge.description_changed(FakeTopologyEvent(was_readable, is_readable))

        assert loop.calls == []

    def test_heartbeat_failure_dispatches_error(self):
        loop, connector = FakeLoop(), RecordingConnector()
        bridge = ConnectionEventBridge(connector, loop)
        error = OSError("timed out")

        bridge.failed(FakeHeartbeatFailure(error))

        assert loop.calls == [(connector.handle_error, (error,))]

    def test_closed_loop_drops_events(self):
        loop = FakeLoop(closed=True)
        bridge = ConnectionEventBridge(RecordingConnector(), loop)

        bridge.failed(FakeHeartbeatFailure(OSError("timed out")))

        assert loop.calls == []
