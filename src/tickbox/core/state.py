# src/tickbox/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from ..todos.todo_models import DueClass, FilterMode, SortMode, Task
from ..todos.todo_store import TodoStore
from ..todos.views import classify_due_date, format_due_date, project


@dataclass(frozen=True, slots=True)
class TaskRow:
    """One displayed row: the task plus its due-date class and label."""

    task: Task
    due_class: DueClass
    due_label: str


@dataclass(frozen=True, slots=True)
class RenderModel:
    """Everything a front-end needs to draw the list once."""

    rows: list[TaskRow]
    filter_mode: FilterMode
    sort_mode: SortMode
    today: date
    total: int
    active: int
    completed: int


@dataclass
class AppState:
    """
    Runtime state shared by front-ends.

    The store owns the tasks; filter/sort modes live here and are
    session-only. Front-ends call the command methods below and redraw from
    `render_model()`; the store never learns about them.
    """

    # Settings object (config.Settings or a test stand-in).
    settings: Any
    store: TodoStore

    filter_mode: FilterMode = FilterMode.ALL
    sort_mode: SortMode = SortMode.NONE
    clock: Callable[[], date] = field(default=date.today)

    def today(self) -> date:
        return self.clock()

    # ---- commands from the presentation layer ----

    def add(self, text: str, due_date: date | None = None) -> Task | None:
        return self.store.add(text, due_date)

    def toggle(self, task_id: int) -> Task | None:
        return self.store.toggle(task_id)

    def delete(self, task_id: int) -> bool:
        return self.store.delete(task_id)

    def set_filter(self, mode: FilterMode | str | None) -> FilterMode:
        self.filter_mode = FilterMode.parse(mode)
        return self.filter_mode

    def set_sort(self, mode: SortMode | str | None) -> SortMode:
        self.sort_mode = SortMode.parse(mode)
        return self.sort_mode

    # ---- projection ----

    def render_model(self) -> RenderModel:
        today = self.today()
        tasks = self.store.tasks
        rows = [
            TaskRow(
                task=t,
                due_class=classify_due_date(t, today),
                due_label=format_due_date(t.due_date, today),
            )
            for t in project(tasks, self.filter_mode, self.sort_mode)
        ]
        done = sum(1 for t in tasks if t.completed)
        return RenderModel(
            rows=rows,
            filter_mode=self.filter_mode,
            sort_mode=self.sort_mode,
            today=today,
            total=len(tasks),
            active=len(tasks) - done,
            completed=done,
        )
