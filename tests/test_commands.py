# tests/test_commands.py

from __future__ import annotations

from taskmanager.cli.commands import CommandRegistry, registry
from taskmanager.core.state import AppState


def test_command_registry_routes_2_and_3_params(state: AppState) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    emitted: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return f"h2:{args}"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    assert reg.handle(state, "/a x  y") == "h2:x  y"
    assert reg.handle(state, "/BEE y", emit=emitted.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert emitted == ["note"]


def test_command_registry_unknown_and_non_command(state: AppState) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_and_get(state: AppState) -> None:
    reply = registry.handle(state, "/add Buy milk | 2 liters")
    assert reply is not None
    assert reply.startswith("Added:")
    assert "#1 [ ] Buy milk" in reply

    task = state.task_store.get_task(1)
    assert task.title == "Buy milk"
    assert task.description == "2 liters"

    shown = registry.handle(state, "/get 1")
    assert shown is not None
    assert "Buy milk" in shown
    assert "2 liters" in shown


def test_add_empty_title_is_reported(state: AppState) -> None:
    assert registry.handle(state, "/add") == "Error: task title cannot be empty"
    assert state.task_store.count_tasks() == 0


def test_store_errors_become_replies(state: AppState) -> None:
    assert registry.handle(state, "/get 0") == "Error: invalid task ID: 0"
    assert registry.handle(state, "/get 999") == "Error: task not found: 999"
    assert registry.handle(state, "/delete -1") == "Error: invalid task ID: -1"
    assert registry.handle(state, "/get abc") == "Error: invalid task ID: 'abc'"
    assert registry.handle(state, "/get") == "Error: Usage: /get <id>"


def test_done_undone_and_list_filters(state: AppState) -> None:
    registry.handle(state, "/add Write report")
    registry.handle(state, "/add Review PR")

    reply = registry.handle(state, "/done 1")
    assert reply is not None and "[x] Write report" in reply

    done_list = registry.handle(state, "/list done") or ""
    open_list = registry.handle(state, "/ls open") or ""
    all_list = registry.handle(state, "/list") or ""

    assert "Write report" in done_list and "Review PR" not in done_list
    assert "Review PR" in open_list and "Write report" not in open_list
    assert all_list.index("Write report") < all_list.index("Review PR")

    registry.handle(state, "/undone 1")
    assert state.task_store.get_task(1).done is False


def test_list_default_filter_from_settings(state: AppState) -> None:
    registry.handle(state, "/add a")
    registry.handle(state, "/add b")
    registry.handle(state, "/done 2")

    state.settings.list_default = "open"
    reply = registry.handle(state, "/list") or ""
    assert "#1" in reply and "#2" not in reply

    assert registry.handle(state, "/list all") is not None
    assert "unknown filter" in (registry.handle(state, "/list later") or "")


def test_list_empty(state: AppState) -> None:
    assert registry.handle(state, "/list") == "No tasks."


def test_update_keeps_done_flag_and_description(state: AppState) -> None:
    registry.handle(state, "/add Draft | notes")
    registry.handle(state, "/done 1")

    registry.handle(state, "/update 1 Final draft")
    task = state.task_store.get_task(1)
    assert task.title == "Final draft"
    assert task.description == "notes"
    assert task.done is True

    registry.handle(state, "/update 1 Final draft | ")
    assert state.task_store.get_task(1).description == ""


def test_update_validation_order(state: AppState) -> None:
    registry.handle(state, "/add keep")
    assert registry.handle(state, "/update 0") == "Error: invalid task ID: 0"
    assert registry.handle(state, "/update 7") == "Error: task not found: 7"
    assert registry.handle(state, "/update 1") == "Error: task title cannot be empty"
    assert state.task_store.get_task(1).title == "keep"


def test_delete_emits_note(state: AppState) -> None:
    registry.handle(state, "/add temp")
    notes: list[str] = []
    assert registry.handle(state, "/rm 1", emit=notes.append) == "Deleted task #1."
    assert notes and "#1" in notes[0]
    assert state.task_store.count_tasks() == 0


def test_status_and_help(state: AppState) -> None:
    registry.handle(state, "/add a")
    registry.handle(state, "/done 1")
    status = registry.handle(state, "/status") or ""
    assert "1 total, 1 done, 0 open" in status
    assert "taskmanager-test" in status

    help_text = registry.handle(state, "/?") or ""
    assert help_text.startswith("Available commands:")
    assert "/add" in help_text and "/list" in help_text


def test_list_todo_word_matches_settings_and_help(state: AppState) -> None:
    registry.handle(state, "/add a")
    registry.handle(state, "/add b")
    registry.handle(state, "/done 1")

    todo = registry.handle(state, "/list todo") or ""
    assert "#2" in todo and "#1" not in todo

    state.settings.list_default = "todo"
    assert registry.handle(state, "/list") == todo

    help_text = registry.handle(state, "/help") or ""
    assert "/list [all|done|open|todo]" in help_text


def test_odd_numeric_ids_are_invalid(state: AppState) -> None:
    registry.handle(state, "/add only")
    assert registry.handle(state, "/get 1_000") == "Error: invalid task ID: '1_000'"
    assert registry.handle(state, "/done +1") == "Error: invalid task ID: '+1'"
    assert state.task_store.get_task(1).done is False
    assert "#1" in (registry.handle(state, "/get #1") or "")
