# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskmanager.config import get_settings
from taskmanager.core.state import AppState
from taskmanager.tasks.task_store import TaskStore

from .fakes import FakeClock

TASKMGR_ENV_VARS = (
    "TASKMGR_APP_NAME",
    "TASKMGR_LOG_LEVEL",
    "TASKMGR_CONSOLE_ENABLED",
    "TASKMGR_LIST_DEFAULT",
    "TASKMGR_DATA_DIR",
)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the command handlers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the process environment.
    """
    return SimpleNamespace(
        app_name="taskmanager-test",
        log_level="DEBUG",
        console_enabled=True,
        list_default="all",
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def restore_root_logging():
    """
    setup_logging() replaces the root handlers; put pytest's back afterwards
    and close whatever the test installed.
    """
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in saved_handlers:
            h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """
    Remove TASKMGR_* variables and reset the cached settings.

    Each name is set before being deleted so monkeypatch also undoes values
    that load_dotenv() writes during the test.
    """
    for name in TASKMGR_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
