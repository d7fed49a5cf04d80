# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from simple_task.store import TaskStore

APP_PATH = Path(__file__).resolve().parents[1] / "simple_task" / "app.py"


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def filled_store(store: TaskStore) -> TaskStore:
    for title in ("Buy milk", "Write report", "Call mom"):
        store.add(title)
    return store
