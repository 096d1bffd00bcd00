# src/taskmanager/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_api import (
    format_task,
    parse_list_filter,
    parse_task_id,
)
from ..tasks.task_models import LIST_FILTERS, TaskError

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, str], str]
CommandHandler3 = Callable[[AppState, str, CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

TITLE_SEPARATOR = "|"
FILTER_WORDS = "|".join(LIST_FILTERS)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Store errors (TaskError) and bad arguments (ValueError) become
        one-line "Error: ..." replies.
        """
        if not line.startswith("/"):
            return None

        body = line[1:].strip()
        if not body:
            return "Empty command. Use /help to list available commands."

        name, _, args = body.partition(" ")
        name = name.lower()
        args = args.strip()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except TaskError as e:
            logger.debug("/%s rejected: %s", name, e)
            return f"Error: {e}"
        except ValueError as e:
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _split_title(args: str) -> tuple[str, str | None]:
    """'title | description' -> (title, description); description None if absent."""
    if TITLE_SEPARATOR not in args:
        return args, None
    title, _, description = args.partition(TITLE_SEPARATOR)
    return title.strip(), description.strip()


def _split_id(args: str, usage: str) -> tuple[int, str]:
    raw_id, _, rest = args.partition(" ")
    if not raw_id:
        raise ValueError(usage)
    return parse_task_id(raw_id), rest.strip()


def cmd_help(state: AppState, args: str) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: str) -> str:
    store = state.task_store
    total = store.count_tasks()
    done = store.count_tasks(done=True)
    default = getattr(state.settings, "list_default", "all")
    return (
        "Status:\n"
        f"  App: {getattr(state.settings, 'app_name', 'taskmanager')}\n"
        f"  Tasks: {total} total, {done} done, {total - done} open\n"
        f"  Default /list filter: {default}"
    )


def cmd_add(state: AppState, args: str) -> str:
    """
    /add <title>                  -> task without description
    /add <title> | <description>  -> task with description
    """
    title, description = _split_title(args)
    task = state.task_store.add_task(title, description or "")
    return f"Added:\n{format_task(task)}"


def cmd_get(state: AppState, args: str) -> str:
    task_id, _ = _split_id(args, "Usage: /get <id>")
    return format_task(state.task_store.get_task(task_id))


def cmd_update(state: AppState, args: str) -> str:
    """
    /update <id> <title>                  -> new title, description kept
    /update <id> <title> | <description>  -> new title and description
    """
    task_id, rest = _split_id(args, "Usage: /update <id> <title> [| <description>]")
    title, description = _split_title(rest)
    task = state.task_store.edit_task(task_id, title, description)
    return f"Updated:\n{format_task(task)}"


def cmd_done(state: AppState, args: str) -> str:
    task_id, _ = _split_id(args, "Usage: /done <id>")
    return format_task(state.task_store.set_done(task_id, True))


def cmd_undone(state: AppState, args: str) -> str:
    task_id, _ = _split_id(args, "Usage: /undone <id>")
    return format_task(state.task_store.set_done(task_id, False))


def cmd_delete(state: AppState, args: str, emit: CommandEmitter | None = None) -> str:
    task_id, _ = _split_id(args, "Usage: /delete <id>")
    state.task_store.delete_task(task_id)
    if emit:
        emit(f"Task #{task_id} removed; its id will not be reused.")
    return f"Deleted task #{task_id}."


def cmd_list(state: AppState, args: str) -> str:
    """
    /list         -> default filter from settings
    /list all     -> every task
    /list done    -> completed tasks only
    /list open    -> not yet completed (alias: todo)
    """
    default = parse_list_filter(getattr(state.settings, "list_default", "all"))
    done = parse_list_filter(args or None, default=default)
    tasks = state.task_store.list_tasks(done)
    if not tasks:
        return "No tasks."
    return "\n".join(format_task(t) for t in tasks)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show settings and task counts.")
registry.register("add", cmd_add, help_text="Create a task: /add <title> [| <description>].")
registry.register("get", cmd_get, help_text="Show a task: /get <id>.", aliases=["show"])
registry.register(
    "update", cmd_update, help_text="Edit a task: /update <id> <title> [| <description>]."
)
registry.register("done", cmd_done, help_text="Mark a task as done: /done <id>.")
registry.register("undone", cmd_undone, help_text="Mark a task as open again: /undone <id>.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register(
    "list", cmd_list, help_text=f"List tasks: /list [{FILTER_WORDS}].", aliases=["ls"]
)
