"""Logging setup for the slugfind command line."""

from __future__ import annotations

import logging
from typing import Final

# Driver loggers that flood DEBUG output with wire-level chatter.
_CHATTY_LOGGERS: Final[tuple[str, ...]] = ("sqlalchemy.engine", "pymongo")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger for CLI use.

    Store driver loggers stay at WARNING even when ``level`` is DEBUG, so resolver
    decisions remain readable. ``force=True`` replaces existing handlers.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
