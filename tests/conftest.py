# tests/conftest.py

from __future__ import annotations

import uuid
from pathlib import Path

import pytest

from todo_backend.db.session import Database
from todo_backend.stores.label_store import LabelStore
from todo_backend.stores.reminder_store import ReminderStore
from todo_backend.stores.task_store import TaskStore


@pytest.fixture()
def database(tmp_path: Path):
    """File-backed SQLite so every store session sees the same data."""
    db = Database(f"sqlite:///{tmp_path / 'todo.sqlite3'}", echo=False)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture()
def task_store(database: Database) -> TaskStore:
    return TaskStore(database)


@pytest.fixture()
def reminder_store(database: Database) -> ReminderStore:
    return ReminderStore(database)


@pytest.fixture()
def label_store(database: Database) -> LabelStore:
    return LabelStore(database)


@pytest.fixture()
def owner_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture()
def other_owner_id() -> uuid.UUID:
    return uuid.uuid4()
