# src/taskmanager/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime

from .task_models import EmptyTitleError, InvalidTaskIdError, Task, TaskNotFoundError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class TaskStore:
    """
    In-memory task store.

    - tasks live in a dict keyed by id; ids come from a per-instance counter
      that starts at 1 and is never rewound, so deleted ids are not reused
    - every public method returns snapshots, never the stored objects

    Thread-safety:
    - every method runs under one lock; validation and mutation happen in the
      same critical section, so a failed update leaves the task untouched
    """

    def __init__(self, *, clock: Clock | None = None) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        self._clock: Clock = clock or _utc_now
        self._lock = threading.Lock()
        logger.info("TaskStore ready (in-memory)")

    def close(self) -> None:
        """Compatibility hook for shutdown (nothing to release)."""
        return

    # ---- low-level helpers ----

    @staticmethod
    def _check_id(task_id: int) -> None:
        # bool is an int subclass; True must not pass as id 1.
        if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id <= 0:
            raise InvalidTaskIdError(task_id)

    def _lookup(self, task_id: int) -> Task:
        self._check_id(task_id)
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    @staticmethod
    def _apply(task: Task, title: str, description: str, done: bool) -> None:
        # Caller holds the lock; nothing is written unless the title is valid.
        if title == "":
            raise EmptyTitleError()
        task.title = title
        task.description = description
        task.done = bool(done)
        logger.debug("Task updated id=%s done=%s", task.id, task.done)

    # ---- public API ----

    def count_tasks(self, done: bool | None = None) -> int:
        with self._lock:
            if done is None:
                return len(self._tasks)
            return sum(1 for t in self._tasks.values() if t.done == done)

    def add_task(self, title: str, description: str = "") -> Task:
        # Exact check: a whitespace-only title is accepted.
        if title == "":
            raise EmptyTitleError()

        with self._lock:
            task = Task(
                id=self._next_id,
                title=title,
                description=description,
                done=False,
                created_at=self._clock(),
            )
            self._tasks[task.id] = task
            self._next_id += 1
            logger.debug("Task added id=%s title=%r", task.id, title)
            return replace(task)

    def get_task(self, task_id: int) -> Task:
        with self._lock:
            return replace(self._lookup(task_id))

    def update_task(self, task_id: int, title: str, description: str, done: bool) -> None:
        """
        Replace title, description and done flag.

        Check order: id validity, then existence, then title.
        """
        with self._lock:
            self._apply(self._lookup(task_id), title, description, done)

    def set_done(self, task_id: int, done: bool) -> Task:
        """Change only the completion flag; returns the updated snapshot."""
        with self._lock:
            task = self._lookup(task_id)
            self._apply(task, task.title, task.description, done)
            return replace(task)

    def edit_task(self, task_id: int, title: str, description: str | None = None) -> Task:
        """
        Replace the title, and the description when given; the done flag is kept.
        Same check order as update_task.
        """
        with self._lock:
            task = self._lookup(task_id)
            new_description = task.description if description is None else description
            self._apply(task, title, new_description, task.done)
            return replace(task)

    def delete_task(self, task_id: int) -> None:
        with self._lock:
            self._lookup(task_id)
            del self._tasks[task_id]
            logger.debug("Task deleted id=%s", task_id)

    def list_tasks(self, done: bool | None = None) -> list[Task]:
        """
        Return tasks ordered by created_at ascending (ties by id).

        done=None -> all tasks; True/False -> only tasks with that flag.
        """
        with self._lock:
            out = [
                replace(t) for t in self._tasks.values() if done is None or t.done == done
            ]
        out.sort(key=lambda t: (t.created_at, t.id))
        return out
