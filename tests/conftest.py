# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from jungle_gem.core.state import AppState
from jungle_gem.storage.kv_store import SqliteKeyValueStorage
from jungle_gem.tasks.task_store import TaskStore

from .fakes import InMemoryStorage, RecordingNotifier


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState, bootstrap and the server.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="jungle-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        storage_path=tmp_path / "data" / "storage.sqlite3",
        storage_key="jg/tasks",
        export_dir=tmp_path / "exports",
        server_host="127.0.0.1",
        server_port=5174,
        cors_origins=["*"],
    )


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture()
def store(storage: InMemoryStorage) -> TaskStore:
    return TaskStore(storage)


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def state(settings: SimpleNamespace, notifier: RecordingNotifier) -> AppState:
    """
    AppState over a real SQLite storage.

    NOTE: the SQLite backend is kept here because durable writes are part of
    what the console commands promise.
    """
    return AppState(
        settings=settings,
        store=TaskStore(SqliteKeyValueStorage(settings.storage_path), key=settings.storage_key),
        notifier=notifier,
        export_dir=settings.export_dir,
    )
