# src/taskmanager/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


class TaskError(Exception):
    """Base class for task store failures (all recoverable)."""


class InvalidTaskIdError(TaskError, ValueError):
    def __init__(self, task_id: object) -> None:
        super().__init__(f"invalid task ID: {task_id!r}")
        self.task_id = task_id


class TaskNotFoundError(TaskError, KeyError):
    def __init__(self, task_id: int) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the args.
        return f"task not found: {self.task_id}"


class EmptyTitleError(TaskError, ValueError):
    def __init__(self) -> None:
        super().__init__("task title cannot be empty")


@dataclass(slots=True)
class Task:
    """
    A unit of trackable work.

    Notes:
    - id and created_at are assigned by the store and never change.
    - instances handed out by TaskStore are snapshots; editing them does not
      touch the stored record.
    """

    id: int
    title: str
    description: str
    done: bool
    created_at: datetime


# Words accepted by `/list` and TASKMGR_LIST_DEFAULT, mapped to the store's done-filter.
LIST_FILTERS: dict[str, bool | None] = {
    "all": None,
    "done": True,
    "open": False,
    "todo": False,
}
