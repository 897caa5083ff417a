# src/tickbox/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the storage slot backend and opens the TodoStore from it,
- wires everything into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import StorageSlot
from ..core.state import AppState
from ..storage.file_slot import JsonFileSlot
from ..storage.sqlite_slot import SqliteSlot
from ..todos.todo_models import FilterMode, SortMode
from ..todos.todo_repository import TodoRepository
from ..todos.todo_store import TodoStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.export_path.parent.mkdir(parents=True, exist_ok=True)


def create_storage_slot(settings) -> StorageSlot:
    backend = str(getattr(settings, "storage_backend", "sqlite")).lower()
    if backend == "json":
        return JsonFileSlot(settings.storage_path)
    if backend != "sqlite":
        logger.warning("Unknown storage backend %r; using sqlite.", backend)
    return SqliteSlot(settings.storage_path)


def create_initial_state(*, settings=None, slot: StorageSlot | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the slot) injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if slot is None:
        slot = create_storage_slot(settings)

    repository = TodoRepository(slot, key=settings.storage_key)
    store = TodoStore.open(repository)

    return AppState(
        settings=settings,
        store=store,
        filter_mode=FilterMode.parse(getattr(settings, "default_filter", None)),
        sort_mode=SortMode.parse(getattr(settings, "default_sort", None)),
    )
