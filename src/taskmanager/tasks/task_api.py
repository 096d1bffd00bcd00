# src/taskmanager/tasks/task_api.py

from __future__ import annotations

from .task_models import LIST_FILTERS, InvalidTaskIdError, Task


def parse_task_id(raw: str) -> int:
    """
    Parse a user-supplied id such as "3", "#3" or "-1".

    Only plain ASCII decimal digits (with an optional leading minus, so the
    store can report non-positive ids) are accepted; "1_000", "+3" or
    non-ASCII digits are invalid ids rather than a crash.
    """
    text = raw.strip().removeprefix("#")
    digits = text.removeprefix("-")
    if not digits or not (digits.isascii() and digits.isdecimal()):
        raise InvalidTaskIdError(raw)
    return int(text)


def parse_list_filter(raw: str | None, default: bool | None = None) -> bool | None:
    """
    Map a LIST_FILTERS word ("all", "done", "open", "todo") to the store's filter value.
    Unknown words raise ValueError.
    """
    if raw is None or raw.strip() == "":
        return default
    key = raw.strip().lower()
    if key not in LIST_FILTERS:
        raise ValueError(f"unknown filter {raw!r} (expected: {', '.join(LIST_FILTERS)})")
    return LIST_FILTERS[key]


def format_task(task: Task) -> str:
    mark = "x" if task.done else " "
    ts = task.created_at.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    line = f"#{task.id} [{mark}] {task.title} (created {ts})"
    if task.description:
        line += f"\n    {task.description}"
    return line
