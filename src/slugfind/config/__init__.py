"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag
from .errors import ConfigurationError, InvalidSettingError
from .logging import configure_logging
from .resolver import RAISE_NOT_FOUND_ENV, ResolverConfig, get_resolver_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "RAISE_NOT_FOUND_ENV",
    "ConfigurationError",
    "DatabaseConfig",
    "InvalidSettingError",
    "ResolverConfig",
    "StorageConfig",
    "configure_logging",
    "env_flag",
    "get_database_config",
    "get_resolver_config",
    "get_storage_config",
]
