# src/tickbox/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on Protocols instead of concrete backends.
This keeps storage swappable (SQLite, JSON files, in-memory fakes in tests).
"""

from collections.abc import Sequence
from typing import Any, Protocol


class StorageSlot(Protocol):
    """
    Durable key-value slot holding whole string documents.

    `set` replaces the value for a key as a whole; there are no partial writes.
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


class TodoRepo(Protocol):
    """What TodoStore needs from persistence."""

    def load(self) -> Any: ...  # TodoSnapshot
    def save(self, tasks: Sequence[Any], next_id: int) -> None: ...
