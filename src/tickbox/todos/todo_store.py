# todos/todo_store.py

from __future__ import annotations

import logging
from datetime import date

from ..core.ports import TodoRepo
from .todo_models import Task
from .views import parse_due_date

logger = logging.getLogger(__name__)


class TodoStore:
    """
    In-memory task list plus the id counter.

    - insertion order is the canonical order (views never reorder it in place)
    - ids come from `next_id` and are never reused, even after delete
    - every successful mutation is flushed to the repository (if any)

    Invalid input (blank text) and unknown ids are silent no-ops.
    """

    def __init__(
        self,
        tasks: list[Task] | None = None,
        next_id: int = 1,
        *,
        repository: TodoRepo | None = None,
    ) -> None:
        self._tasks: list[Task] = list(tasks or [])
        self._next_id = max([next_id, *(t.id + 1 for t in self._tasks)])
        self._repository = repository

    @classmethod
    def open(cls, repository: TodoRepo) -> TodoStore:
        snapshot = repository.load()
        store = cls(snapshot.tasks, snapshot.next_id, repository=repository)
        logger.info("TodoStore ready total=%s next_id=%s", len(store), store.next_id)
        return store

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def tasks(self) -> list[Task]:
        """Shallow copy in insertion order."""
        return list(self._tasks)

    def get(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def _save(self) -> None:
        if self._repository is None:
            return
        self._repository.save(self._tasks, self._next_id)

    # ---- commands ----

    def add(self, text: str, due_date: date | None = None) -> Task | None:
        text = (text or "").strip()
        if not text:
            return None

        # Due dates are calendar days; a datetime is reduced to its date.
        task = Task(id=self._next_id, text=text, completed=False, due_date=parse_due_date(due_date))
        self._next_id += 1
        self._tasks.append(task)
        logger.debug("Task added id=%s due_date=%s", task.id, due_date)
        self._save()
        return task

    def toggle(self, task_id: int) -> Task | None:
        task = self.get(task_id)
        if task is None:
            return None

        task.completed = not task.completed
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        self._save()
        return task

    def delete(self, task_id: int) -> bool:
        kept = [t for t in self._tasks if t.id != task_id]
        if len(kept) == len(self._tasks):
            return False

        self._tasks = kept
        logger.debug("Task deleted id=%s", task_id)
        self._save()
        return True
