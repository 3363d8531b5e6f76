"""Lifespan: Mongo handle opened on startup, closed on shutdown, fatal on failure.

Invariants:
    - app.state.mongo is set only after a successful ping
    - A failed initial connection raises SystemExit(1) and closes the client
"""

import pytest

import nexuscore.main as main_module
from nexuscore.core.errors import DatabaseConnectionError
from nexuscore.main import app, lifespan


class _RecordingManager:
    instances: list["_RecordingManager"] = []
    fail_with: str | None = None

    def __init__(self, mongo_uri, database, server_selection_timeout_ms):
        self.mongo_uri = mongo_uri
        self.database = database
        self.timeout = server_selection_timeout_ms
        self.connected = False
        self.closed = False
        _RecordingManager.instances.append(self)

    async def connect(self):
        if self.fail_with:
            raise DatabaseConnectionError(self.fail_with)
        self.connected = True

    async def close(self):
        self.connected = False
        self.closed = True


@pytest.fixture
def manager_cls(monkeypatch):
    _RecordingManager.instances = []
    _RecordingManager.fail_with = None
    monkeypatch.setattr(main_module, "MongoManager", _RecordingManager)
    monkeypatch.setattr(main_module, "setup_logging", lambda *a, **k: None)
    yield _RecordingManager
    app.state.mongo = None


async def test_startup_connects_and_shutdown_closes(manager_cls):
    async with lifespan(app):
        (manager,) = manager_cls.instances
        assert app.state.mongo is manager
        assert manager.connected
        assert manager.mongo_uri.startswith("mongodb://")
    assert manager.closed
    assert app.state.mongo is None


async def test_failed_initial_connection_exits_process(manager_cls):
    manager_cls.fail_with = "No servers found yet"
    with pytest.raises(SystemExit) as excinfo:
        async with lifespan(app):
            pytest.fail("lifespan must not yield after a failed connection")
    assert excinfo.value.code == 1
    (manager,) = manager_cls.instances
    assert manager.closed
    assert getattr(app.state, "mongo", None) is None
