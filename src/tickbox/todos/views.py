# todos/views.py

"""
View pipeline: pure projections of the task list used for display.

None of these functions mutate their input. Filtering runs before sorting,
so sorting only reorders the already-filtered subset (see `project`).
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from .todo_models import DueClass, FilterMode, SortMode, Task

_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def _as_day(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_due_date(raw: object) -> date | None:
    """
    Parse a due date.

    Accepts date/datetime objects and ISO strings ("2024-01-20" or a full
    ISO datetime, reduced to its calendar day). Returns None when the value
    cannot be interpreted.
    """
    if raw is None:
        return None
    if isinstance(raw, (date, datetime)):
        return _as_day(raw)
    if not isinstance(raw, str):
        return None

    s = raw.strip()
    if not s:
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        return None


def filter_tasks(tasks: Iterable[Task], mode: FilterMode | str | None) -> list[Task]:
    mode = FilterMode.parse(mode)
    if mode is FilterMode.ACTIVE:
        return [t for t in tasks if not t.completed]
    if mode is FilterMode.COMPLETED:
        return [t for t in tasks if t.completed]
    return list(tasks)


def classify_due_date(task: Task, reference: date | datetime) -> DueClass:
    if task.due_date is None:
        return DueClass.NONE

    due = _as_day(task.due_date)
    today = _as_day(reference)

    if due < today:
        # Completed tasks never show as overdue.
        return DueClass.NONE if task.completed else DueClass.OVERDUE
    if due == today:
        return DueClass.DUE_TODAY
    if due == today + timedelta(days=1):
        return DueClass.DUE_TOMORROW
    return DueClass.NONE


def sort_tasks(tasks: Iterable[Task], mode: SortMode | str | None) -> list[Task]:
    """
    Order tasks for display.

    due-date: dated tasks first, ascending; undated tasks after them in their
    original order. `sorted` is stable, so equal keys keep insertion order.
    """
    mode = SortMode.parse(mode)
    if mode is not SortMode.DUE_DATE:
        return list(tasks)
    return sorted(tasks, key=lambda t: (t.due_date is None, t.due_date or date.min))


def format_due_date(value: object, reference: date | datetime) -> str:
    due = parse_due_date(value)
    if due is None:
        return ""

    today = _as_day(reference)
    if due == today:
        return "Today"
    if due == today + timedelta(days=1):
        return "Tomorrow"
    return f"{_MONTH_ABBR[due.month - 1]} {due.day}"


def project(
    tasks: Iterable[Task],
    filter_mode: FilterMode | str | None,
    sort_mode: SortMode | str | None,
) -> list[Task]:
    return sort_tasks(filter_tasks(tasks, filter_mode), sort_mode)
