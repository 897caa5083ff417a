# tests/test_bootstrap.py

from __future__ import annotations

from tickbox.cli.bootstrap import create_initial_state, create_storage_slot
from tickbox.storage.file_slot import JsonFileSlot
from tickbox.storage.sqlite_slot import SqliteSlot
from tickbox.todos.todo_models import FilterMode, SortMode

from .fakes import MemorySlot


def test_backend_selection(settings) -> None:
    assert isinstance(create_storage_slot(settings), SqliteSlot)

    settings.storage_backend = "json"
    settings.storage_path = settings.data_dir / "slots"
    assert isinstance(create_storage_slot(settings), JsonFileSlot)


def test_state_persists_across_restarts(settings) -> None:
    first = create_initial_state(settings=settings)
    first.add("survives restart")
    first.toggle(1)

    second = create_initial_state(settings=settings)
    assert [(t.id, t.text, t.completed) for t in second.store.tasks] == [
        (1, "survives restart", True)
    ]
    assert second.store.next_id == 2


def test_default_modes_from_settings(settings) -> None:
    settings.default_filter = "completed"
    settings.default_sort = "due-date"
    state = create_initial_state(settings=settings, slot=MemorySlot())
    assert state.filter_mode is FilterMode.COMPLETED
    assert state.sort_mode is SortMode.DUE_DATE


def test_corrupt_storage_starts_empty(settings) -> None:
    slot = MemorySlot({"todos_app_data": "not json"})
    state = create_initial_state(settings=settings, slot=slot)
    assert len(state.store) == 0
    assert state.store.next_id == 1
