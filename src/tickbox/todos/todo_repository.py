# todos/todo_repository.py

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..core.ports import StorageSlot
from .todo_models import Task
from .views import parse_due_date

logger = logging.getLogger(__name__)

STORAGE_KEY = "todos_app_data"


class CorruptDocumentError(ValueError):
    """Stored document is not valid JSON or does not have the expected shape."""


@dataclass(slots=True)
class TodoSnapshot:
    tasks: list[Task] = field(default_factory=list)
    next_id: int = 1


def _is_int(v: Any) -> bool:
    # bool is an int subclass; true/false are never valid ids.
    return isinstance(v, int) and not isinstance(v, bool)


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "completed": task.completed,
        "dueDate": task.due_date.isoformat() if task.due_date is not None else None,
    }


def task_from_dict(raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise CorruptDocumentError("todo entry is not an object")

    tid = raw.get("id")
    if not _is_int(tid):
        raise CorruptDocumentError(f"todo id is not an integer: {tid!r}")

    text = raw.get("text")
    if not isinstance(text, str) or not text.strip():
        raise CorruptDocumentError(f"todo {tid} has empty or non-string text")

    completed = raw.get("completed", False)
    if not isinstance(completed, bool):
        raise CorruptDocumentError(f"todo {tid} has non-boolean completed flag")

    raw_due = raw.get("dueDate")
    due_date = None
    if raw_due is not None:
        due_date = parse_due_date(raw_due)
        if due_date is None:
            raise CorruptDocumentError(f"todo {tid} has unparseable dueDate {raw_due!r}")

    return Task(id=int(tid), text=text.strip(), completed=completed, due_date=due_date)


def encode_document(tasks: Sequence[Task], next_id: int) -> str:
    data = {
        "todos": [task_to_dict(t) for t in tasks],
        "nextId": int(next_id),
    }
    return json.dumps(data, ensure_ascii=False)


def decode_document(raw: str) -> TodoSnapshot:
    """
    Parse a stored document into a snapshot.

    Raises CorruptDocumentError on anything that is not a well-formed
    {"todos": [...], "nextId": int} document.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as e:
        raise CorruptDocumentError(f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise CorruptDocumentError("document is not an object")

    todos = data.get("todos")
    if not isinstance(todos, list):
        raise CorruptDocumentError("'todos' is missing or not a list")

    next_id = data.get("nextId")
    if not _is_int(next_id):
        raise CorruptDocumentError("'nextId' is missing or not an integer")

    tasks = [task_from_dict(item) for item in todos]

    ids = [t.id for t in tasks]
    if len(set(ids)) != len(ids):
        raise CorruptDocumentError("duplicate todo ids")
    if next_id < 1 or (ids and next_id <= max(ids)):
        raise CorruptDocumentError(f"'nextId'={next_id} does not exceed every stored id")

    return TodoSnapshot(tasks=tasks, next_id=int(next_id))


class TodoRepository:
    """
    Persistence adapter: one JSON document under one storage key.

    Load never raises: a missing key gives an empty snapshot, and a corrupt or
    unexpected document is discarded as a whole (logged, then empty snapshot).
    Save failures are logged and swallowed so a broken disk never takes the
    app down.
    """

    def __init__(self, slot: StorageSlot, key: str = STORAGE_KEY) -> None:
        self._slot = slot
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> TodoSnapshot:
        try:
            raw = self._slot.get(self._key)
        except Exception:
            logger.exception("Failed to read todos from storage key=%s; starting empty.", self._key)
            return TodoSnapshot()

        if raw is None:
            logger.debug("No stored todos under key=%s; starting empty.", self._key)
            return TodoSnapshot()

        try:
            snapshot = decode_document(raw)
        except CorruptDocumentError as e:
            logger.warning("Failed to load todos from storage key=%s: %s. Resetting.", self._key, e)
            return TodoSnapshot()

        logger.info("Loaded %d todos (next_id=%d).", len(snapshot.tasks), snapshot.next_id)
        return snapshot

    def save(self, tasks: Sequence[Task], next_id: int) -> None:
        try:
            self._slot.set(self._key, encode_document(tasks, next_id))
        except Exception:
            logger.exception("Failed to save todos to storage key=%s.", self._key)
            return
        logger.debug("Saved %d todos (next_id=%d).", len(tasks), next_id)
