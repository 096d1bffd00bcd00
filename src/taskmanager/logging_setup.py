# src/taskmanager/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "taskmanager.log"

# Per-operation store logs (add/update/delete) go to the file; the console
# only sees them at this level or above.
STORE_LOGGER_PREFIX = "taskmanager.tasks."

CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s [%(threadName)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the REPL readable while commands print their own replies:
    - taskmanager.tasks.* chatter only at `store_level`+
    - other taskmanager logs pass (handler level still applies)
    - captured Python warnings ('py.warnings') at WARNING+
    - any other 3rd party at ERROR+
    """

    def __init__(self, store_level: int = logging.WARNING) -> None:
        super().__init__()
        self.store_level = store_level

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name.startswith(STORE_LOGGER_PREFIX):
            return record.levelno >= self.store_level
        if name.startswith("taskmanager."):
            return True
        if name == "py.warnings":
            return record.levelno >= logging.WARNING
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskmanager",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    store_console_level: int | None = None,
) -> Path:
    """
    Install a filtered stderr handler and a full-detail file handler on the root logger.

    store_console_level defaults to WARNING, or DEBUG when console_level is
    DEBUG (asking for a debug console means wanting the store's trace too).
    Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    if store_console_level is None:
        store_console_level = logging.DEBUG if console_level <= logging.DEBUG else logging.WARNING

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))

    # Re-running setup replaces handlers instead of duplicating output.
    for h in list(root.handlers):
        root.removeHandler(h)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    console.addFilter(_ConsoleNoiseFilter(store_level=store_console_level))
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
