# tests/test_views.py

from __future__ import annotations

from datetime import date, datetime

import pytest

from tickbox.todos.todo_models import DueClass, FilterMode, SortMode, Task
from tickbox.todos.views import (
    classify_due_date,
    filter_tasks,
    format_due_date,
    parse_due_date,
    project,
    sort_tasks,
)

REF = date(2024, 1, 15)


@pytest.fixture()
def tasks() -> list[Task]:
    return [
        Task(id=1, text="a", completed=False),
        Task(id=2, text="b", completed=True),
        Task(id=3, text="c", completed=False, due_date=date(2024, 1, 20)),
        Task(id=4, text="d", completed=True, due_date=date(2024, 1, 10)),
    ]


def test_filter_partitions(tasks: list[Task]) -> None:
    active = filter_tasks(tasks, "active")
    done = filter_tasks(tasks, "completed")

    assert {t.id for t in active} & {t.id for t in done} == set()
    assert sorted(t.id for t in active + done) == [1, 2, 3, 4]
    assert all(not t.completed for t in active)
    assert all(t.completed for t in done)


def test_filter_all_and_unknown_are_identity(tasks: list[Task]) -> None:
    assert filter_tasks(tasks, FilterMode.ALL) == tasks
    assert filter_tasks(tasks, "bogus") == tasks
    assert filter_tasks(tasks, None) == tasks
    assert filter_tasks(tasks, "all") is not tasks


def test_sort_by_due_date_example() -> None:
    undated = Task(id=1, text="no date")
    late = Task(id=2, text="late", due_date=date(2024, 1, 20))
    early = Task(id=3, text="early", due_date=date(2024, 1, 10))
    original = [undated, late, early]

    ordered = sort_tasks(original, "due-date")

    assert [t.id for t in ordered] == [3, 2, 1]
    assert [t.id for t in original] == [1, 2, 3]
    assert classify_due_date(early, REF) is DueClass.OVERDUE
    assert classify_due_date(late, REF) is DueClass.NONE


def test_sort_is_stable_for_undated_and_equal_dates() -> None:
    d = date(2024, 2, 1)
    items = [
        Task(id=1, text="u1"),
        Task(id=2, text="d1", due_date=d),
        Task(id=3, text="u2"),
        Task(id=4, text="d2", due_date=d),
        Task(id=5, text="u3"),
    ]
    assert [t.id for t in sort_tasks(items, SortMode.DUE_DATE)] == [2, 4, 1, 3, 5]


def test_sort_none_and_unknown_keep_order(tasks: list[Task]) -> None:
    assert sort_tasks(tasks, "none") == tasks
    assert sort_tasks(tasks, "alphabetical") == tasks


@pytest.mark.parametrize(
    ("due", "completed", "expected"),
    [
        (date(2024, 1, 14), False, DueClass.OVERDUE),
        (date(2024, 1, 14), True, DueClass.NONE),
        (date(2024, 1, 15), False, DueClass.DUE_TODAY),
        (date(2024, 1, 15), True, DueClass.DUE_TODAY),
        (date(2024, 1, 16), False, DueClass.DUE_TOMORROW),
        (date(2024, 1, 17), False, DueClass.NONE),
        (None, False, DueClass.NONE),
    ],
)
def test_classify_due_date(due: date | None, completed: bool, expected: DueClass) -> None:
    task = Task(id=1, text="x", completed=completed, due_date=due)
    assert classify_due_date(task, REF) is expected


def test_classify_ignores_time_of_day() -> None:
    task = Task(id=1, text="x", due_date=date(2024, 1, 15))
    assert classify_due_date(task, datetime(2024, 1, 15, 23, 59)) is DueClass.DUE_TODAY
    assert classify_due_date(task, datetime(2024, 1, 14, 0, 1)) is DueClass.DUE_TOMORROW


def test_format_due_date_labels() -> None:
    assert format_due_date(date(2024, 1, 15), REF) == "Today"
    assert format_due_date(date(2024, 1, 16), REF) == "Tomorrow"
    assert format_due_date(date(2024, 3, 1), REF) == "Mar 1"
    assert format_due_date("2024-01-25", REF) == "Jan 25"
    assert format_due_date("2024-01-15T18:30:00", REF) == "Today"


@pytest.mark.parametrize("bad", ["", "not a date", "2024-13-40", None, 42])
def test_format_due_date_unparseable_is_empty(bad: object) -> None:
    assert format_due_date(bad, REF) == ""


def test_format_due_date_crosses_month_and_year() -> None:
    assert format_due_date(date(2024, 2, 1), date(2024, 1, 31)) == "Tomorrow"
    assert format_due_date(date(2025, 1, 1), date(2024, 12, 31)) == "Tomorrow"


def test_parse_due_date() -> None:
    assert parse_due_date("2024-01-20") == date(2024, 1, 20)
    assert parse_due_date(" 2024-01-20 ") == date(2024, 1, 20)
    assert parse_due_date(datetime(2024, 1, 20, 8, 0)) == date(2024, 1, 20)
    assert parse_due_date("tomorrow") is None


def test_project_filters_before_sorting(tasks: list[Task]) -> None:
    out = project(tasks, "active", "due-date")
    assert [t.id for t in out] == [3, 1]


def test_mode_parse() -> None:
    assert FilterMode.parse(" Active ") is FilterMode.ACTIVE
    assert FilterMode.parse("") is FilterMode.ALL
    assert SortMode.parse("due-date") is SortMode.DUE_DATE
    assert SortMode.parse("DUE-DATE") is SortMode.DUE_DATE
    assert SortMode.parse("random") is SortMode.NONE
