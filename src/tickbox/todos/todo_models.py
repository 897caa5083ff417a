# todos/todo_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class FilterMode(StrEnum):
    """Which tasks the list shows."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | None) -> FilterMode:
        if not raw:
            return cls.ALL
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.ALL


class SortMode(StrEnum):
    DUE_DATE = "due-date"
    NONE = "none"

    @classmethod
    def parse(cls, raw: str | None) -> SortMode:
        if not raw:
            return cls.NONE
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            return cls.NONE


class DueClass(StrEnum):
    """
    Display class of a task's due date relative to a reference day.

    Values double as CSS class names in the HTML export.
    """

    OVERDUE = "overdue"
    DUE_TODAY = "due-today"
    DUE_TOMORROW = "due-tomorrow"
    NONE = "none"


@dataclass(slots=True)
class Task:
    id: int
    text: str
    completed: bool = False
    due_date: date | None = None
