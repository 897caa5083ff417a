# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file,
looked up from the working directory). This file exists to make the repo self-documenting.
"""

ENV_VARS = {
    # App / logging
    "TICKBOX_APP_NAME": "App display name, also the HTML export title (default: tickbox).",
    "TICKBOX_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Front-end
    "TICKBOX_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    "TICKBOX_DEFAULT_FILTER": "Filter at startup: all | active | completed (default: all).",
    "TICKBOX_DEFAULT_SORT": "Sort at startup: due-date | none (default: none).",
    # Storage (gitignored)
    "TICKBOX_DATA_DIR": "Local data directory for storage, logs and exports (default: .local/tickbox).",
    "TICKBOX_STORAGE_BACKEND": "Key-value slot backend: sqlite | json (default: sqlite).",
    "TICKBOX_STORAGE_PATH": (
        "SQLite file (sqlite) or slot directory (json) "
        "(default: <data_dir>/storage.sqlite3 or <data_dir>/storage)."
    ),
    "TICKBOX_STORAGE_KEY": "Key holding the todo document (default: todos_app_data).",
    "TICKBOX_EXPORT_PATH": "Default target of /export (default: <data_dir>/todos.html).",
}
