"""Ports the resolver consumes from the document store and schema layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from slugfind.domain.model import Document, KeyField, SlugStrategy


@runtime_checkable
class QueryExecutor(Protocol):
    """Runs an in-set filter: documents whose ``field`` intersects ``values``."""

    def execute_in_set(self, field: str, values: Sequence[str], limit: int) -> list[Document]: ...


@runtime_checkable
class KeyLookup(Protocol):
    """Default primary-key resolution."""

    def find_by_keys(self, keys: Sequence[object], limit: int) -> list[Document]: ...


@runtime_checkable
class DocumentRepository(QueryExecutor, KeyLookup, Protocol):
    """Store contract covering both lookup paths plus writes."""

    def add(self, document: Document) -> None: ...


@runtime_checkable
class DocumentUnitOfWork(Protocol):
    """Transaction boundary around the documents of one collection."""

    @property
    def documents(self) -> DocumentRepository: ...

    def __enter__(self) -> DocumentUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


@runtime_checkable
class StrategyProvider(Protocol):
    """Yields the key-likeness predicate for a key field.

    The boolean is ``True`` when the field carried an explicit override.
    """

    def strategy_for(self, key_field: KeyField) -> tuple[SlugStrategy, bool]: ...
