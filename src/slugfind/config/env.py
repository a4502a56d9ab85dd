"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import Final

from .errors import InvalidSettingError

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def env_flag(name: str, *, default: bool) -> bool:
    """Read a boolean switch; unset or blank means ``default``."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise InvalidSettingError(name, value, "one of 1/0, true/false, yes/no, on/off")
