# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from tickbox.core.state import AppState
from tickbox.todos.todo_repository import TodoRepository
from tickbox.todos.todo_store import TodoStore

from .fakes import MemorySlot

TODAY = date(2024, 1, 15)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tickbox-test",
        log_level="WARNING",
        console_enabled=True,
        default_filter="all",
        default_sort="none",
        data_dir=tmp_path,
        storage_backend="sqlite",
        storage_path=tmp_path / "storage.sqlite3",
        storage_key="todos_app_data",
        export_path=tmp_path / "todos.html",
    )


@pytest.fixture()
def slot() -> MemorySlot:
    return MemorySlot()


@pytest.fixture()
def repository(slot: MemorySlot) -> TodoRepository:
    return TodoRepository(slot)


@pytest.fixture()
def state(settings: SimpleNamespace, repository: TodoRepository) -> AppState:
    """AppState over an in-memory slot with the clock pinned to 2024-01-15."""
    return AppState(
        settings=settings,
        store=TodoStore.open(repository),
        clock=lambda: TODAY,
    )
