"""Resolver policy configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import env_flag

RAISE_NOT_FOUND_ENV: Final[str] = "SLUGFIND_RAISE_NOT_FOUND"


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Policy handed to every resolver the application builds.

    ``raise_not_found`` decides whether unmatched identifiers raise
    ``DocumentNotFoundError`` or are dropped from the result.
    """

    raise_not_found: bool = True


def get_resolver_config() -> ResolverConfig:
    return ResolverConfig(raise_not_found=env_flag(RAISE_NOT_FOUND_ENV, default=True))
