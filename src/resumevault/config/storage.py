"""Location of the SQLite record store."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var

APP_DIR_NAME: Final[str] = "resumevault"
DEFAULT_DB_FILENAME: Final[str] = "resumevault.db"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def data_dir() -> Path:
    """``RESUMEVAULT_DATA_DIR`` or the per-user platform data directory."""

    if explicit := optional_env_var("RESUMEVAULT_DATA_DIR", ""):
        return Path(explicit).expanduser().resolve()
    if os.name == "nt":
        root = os.getenv("LOCALAPPDATA") or str(Path.home() / "AppData" / "Local")
    else:
        root = os.getenv("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return (Path(root) / APP_DIR_NAME).expanduser().resolve()


def get_database_config() -> DatabaseConfig:
    if env_uri := optional_env_var("DATABASE_URI", ""):
        return DatabaseConfig(uri=env_uri)
    directory = data_dir()
    directory.mkdir(parents=True, exist_ok=True)
    return DatabaseConfig(uri=f"sqlite+pysqlite:///{directory / DEFAULT_DB_FILENAME}")
