"""Errors raised by the resolver."""

from __future__ import annotations

from dataclasses import dataclass


class SlugFindError(Exception):
    """Base class for resolver failures."""


class InvalidArgumentError(SlugFindError, ValueError):
    """Raised when a requested identifier is missing or empty."""


@dataclass(frozen=True, slots=True)
class NotFoundPayload:
    """What was asked for and what could not be matched."""

    collection_name: str
    requested: tuple[str, ...]
    missing: tuple[str, ...]

    @property
    def is_total_miss(self) -> bool:
        return set(self.missing) == set(self.requested)

    @property
    def is_partial_miss(self) -> bool:
        return bool(self.missing) and not self.is_total_miss


class DocumentNotFoundError(SlugFindError, LookupError):
    """Raised when one or more requested identifiers matched no document."""

    def __init__(self, payload: NotFoundPayload) -> None:
        self.payload = payload
        super().__init__(
            f"Document(s) not found for collection {payload.collection_name!r} "
            f"with identifier(s) {', '.join(payload.requested)} "
            f"(missing: {', '.join(payload.missing)})"
        )
