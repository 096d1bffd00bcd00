# src/taskmanager/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL.
All data lives in memory and is lost on exit.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state: AppState) -> None:
    """Best-effort shutdown; the store holds no external resources."""
    try:
        remaining = state.task_store.count_tasks()
        state.task_store.close()
        logger.info("Discarding %d in-memory task(s).", remaining)
    except Exception:
        logger.exception("Task store shutdown failed.")


def main() -> None:
    settings = get_settings()

    level_name = settings.log_level.upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.warning("Console disabled (TASKMGR_CONSOLE_ENABLED=0); nothing to run.")
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
