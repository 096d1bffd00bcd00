# src/taskmanager/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the front ends.

Commands depend on the TaskRepo Protocol instead of the concrete TaskStore,
so tests and alternative stores can be swapped in.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class TaskRepo(Protocol):
    # CRUD
    def add_task(self, title: str, description: str = "") -> Task: ...
    def get_task(self, task_id: int) -> Task: ...
    def update_task(self, task_id: int, title: str, description: str, done: bool) -> None: ...
    def set_done(self, task_id: int, done: bool) -> Task: ...
    def edit_task(self, task_id: int, title: str, description: str | None = None) -> Task: ...
    def delete_task(self, task_id: int) -> None: ...

    # Queries
    def list_tasks(self, done: bool | None = None) -> list[Task]: ...
    def count_tasks(self, done: bool | None = None) -> int: ...

    def close(self) -> None: ...
