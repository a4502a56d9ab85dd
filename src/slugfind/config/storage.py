"""Where the SQL document store lives."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "slugfind"
DEFAULT_DB_FILENAME: Final[str] = "slugfind.db"
DATA_DIR_ENV: Final[str] = "SLUGFIND_DATA_DIR"
DATABASE_URI_ENV: Final[str] = "DATABASE_URI"


def _platform_data_home() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        return Path(base) if base else (Path.home() / "AppData" / "Local")
    base = os.getenv("XDG_DATA_HOME")
    return Path(base) if base else (Path.home() / ".local" / "share")


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    database_filename: str = DEFAULT_DB_FILENAME

    @classmethod
    def from_environment(cls) -> StorageConfig:
        env_dir = os.getenv(DATA_DIR_ENV)
        data_dir = Path(env_dir) if env_dir else _platform_data_home() / APP_DIR_NAME
        return cls(data_dir=data_dir)

    def database_path(self, *, ensure: bool = True) -> Path:
        data_dir = self.data_dir.expanduser().resolve()
        if ensure:
            data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir / self.database_filename

    def database_uri(self) -> str:
        return f"sqlite+pysqlite:///{self.database_path()}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    """SQLAlchemy URI of the document store; any dialect SQLAlchemy supports."""

    uri: str


def get_storage_config() -> StorageConfig:
    return StorageConfig.from_environment()


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    env_uri = os.getenv(DATABASE_URI_ENV)
    if env_uri:
        return DatabaseConfig(uri=env_uri)
    return DatabaseConfig(uri=(storage or get_storage_config()).database_uri())
