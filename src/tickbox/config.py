# src/tickbox/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TICKBOX"

STORAGE_BACKENDS = ("sqlite", "json")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Front-end ----
    console_enabled: bool
    default_filter: str
    default_sort: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    storage_backend: str
    storage_path: Path
    storage_key: str
    export_path: Path

    @staticmethod
    def from_env() -> "Settings":
        # .env is looked up from the working directory, not from this file.
        load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), "tickbox").strip() or "tickbox"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)
        # Unknown values fall back inside FilterMode/SortMode.parse.
        default_filter = _env(_k("DEFAULT_FILTER"), "all").strip().lower()
        default_sort = _env(_k("DEFAULT_SORT"), "none").strip().lower()

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tickbox"))
        storage_backend = _env_choice(_k("STORAGE_BACKEND"), STORAGE_BACKENDS, "sqlite")
        default_storage = data_dir / ("storage.sqlite3" if storage_backend == "sqlite" else "storage")
        storage_path = _env_path(_k("STORAGE_PATH"), default_storage)
        storage_key = _env(_k("STORAGE_KEY"), "todos_app_data").strip() or "todos_app_data"
        export_path = _env_path(_k("EXPORT_PATH"), data_dir / "todos.html")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            default_filter=default_filter,
            default_sort=default_sort,
            data_dir=data_dir,
            storage_backend=storage_backend,
            storage_path=storage_path,
            storage_key=storage_key,
            export_path=export_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
