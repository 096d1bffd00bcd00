# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKMGR_APP_NAME": "App display name (default: taskmanager).",
    "TASKMGR_LOG_LEVEL": "Console logging level (default: INFO).",
    # Connectors
    "TASKMGR_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    # Console behaviour
    "TASKMGR_LIST_DEFAULT": "Filter used by a bare /list: all | done | open | todo (default: all).",
    # Paths (gitignored)
    "TASKMGR_DATA_DIR": "Local data directory for the log file (default: .local/taskmanager).",
}
