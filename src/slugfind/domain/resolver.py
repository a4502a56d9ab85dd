"""Resolve identifiers to documents by primary key or by slug.

``SlugResolver.find`` accepts the same call shapes as a primary-key lookup. When
every identifier is a string and none of them looks like a key for the
collection's key type, the batch is resolved through the slug field instead.
A batch is never split: a single key-like value among slugs still sends the
whole batch down the slug path, and vice versa.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from slugfind.domain.errors import DocumentNotFoundError, InvalidArgumentError, NotFoundPayload
from slugfind.domain.find_args import normalize_find_args
from slugfind.domain.strategies import StrategyCache, canonical_key

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from slugfind.domain.find_args import FindArgs
    from slugfind.domain.model import CollectionSchema, Document, Identifier
    from slugfind.domain.ports import KeyLookup, QueryExecutor

type FindResult = Document | list[Document] | None

log = logging.getLogger(__name__)


class SlugResolver:
    """Lookup facade for one collection.

    Parameters
    ----------
    schema:
        Collection name, key field descriptor and slug field name.
    executor:
        Runs the in-set filter over the slug field.
    key_lookup:
        Default primary-key resolution used for key-like batches. Without it,
        key-like batches raise :class:`InvalidArgumentError`.
    raise_not_found:
        Raise :class:`DocumentNotFoundError` when anything is missing; when off,
        partial results are returned silently.
    strategy_cache:
        Shared strategy memo; pass one instance to several resolvers to share it.
    """

    def __init__(
        self,
        schema: CollectionSchema,
        executor: QueryExecutor,
        key_lookup: KeyLookup | None = None,
        *,
        raise_not_found: bool = True,
        strategy_cache: StrategyCache | None = None,
    ) -> None:
        self.schema = schema
        self.executor = executor
        self.key_lookup = key_lookup
        self.raise_not_found = raise_not_found
        self.strategy_cache = strategy_cache if strategy_cache is not None else StrategyCache()

    def find(self, *args: object) -> FindResult:
        """Find document(s) by primary key(s) or slug(s).

        ``find("slug")`` returns one document, ``find(["a", "b"])`` and
        ``find("a", "b")`` return lists in store order.
        """

        find_args = self._normalize(args)
        if self.looks_like_slugs(find_args.identifiers):
            return self._find_by_slugs(find_args.identifiers, multi=find_args.multi)
        return self._find_by_keys(find_args.identifiers, multi=find_args.multi)

    def find_by_slug(self, *args: object) -> FindResult:
        """Find document(s) by slug only, skipping key classification."""

        find_args = self._normalize(args)
        return self._find_by_slugs(find_args.identifiers, multi=find_args.multi)

    def _normalize(self, args: tuple[object, ...]) -> FindArgs:
        if not args:
            raise InvalidArgumentError(
                f"Calling find on {self.schema.name!r} requires at least one identifier"
            )
        return normalize_find_args(args)

    def _find_by_slugs(self, slugs: tuple[Identifier, ...], *, multi: bool) -> FindResult:
        slugs = self._validate(slugs)
        if not slugs:
            return []
        requested = [str(slug) for slug in slugs]
        log.debug("Resolving %s by slug: %s", self.schema.name, requested)
        documents = _unique(
            self.executor.execute_in_set(self.schema.slug_field, requested, len(requested))
        )
        matched = {slug for document in documents for slug in document.slugs}
        self._check_missing(requested, lambda slug: slug in matched)
        return _shape(documents, multi=multi)

    def looks_like_slugs(self, identifiers: Sequence[Identifier]) -> bool:
        """Whether the whole batch should be resolved as slugs."""

        if not all(isinstance(identifier, str) for identifier in identifiers):
            return False
        strategy = self.strategy_cache.get(self.schema)
        slugs = cast("Sequence[str]", identifiers)
        return not any(strategy(slug) for slug in slugs)

    def _find_by_keys(self, keys: tuple[Identifier, ...], *, multi: bool) -> FindResult:
        keys = self._validate(keys)
        if not keys:
            return []
        if self.key_lookup is None:
            raise InvalidArgumentError(
                f"Collection {self.schema.name!r} has no key lookup configured; "
                f"cannot resolve key-like identifiers {[str(key) for key in keys]}"
            )
        log.debug("Resolving %s by key: %s", self.schema.name, keys)
        documents = _unique(self.key_lookup.find_by_keys(list(keys), len(keys)))
        key_field = self.schema.key_field
        requested = [str(key) for key in keys]
        matched = {canonical_key(key_field, document.id) for document in documents}
        self._check_missing(requested, lambda key: canonical_key(key_field, key) in matched)
        return _shape(documents, multi=multi)

    def _validate(self, identifiers: tuple[Identifier, ...]) -> tuple[Identifier, ...]:
        if any(identifier is None or identifier == "" for identifier in identifiers):
            raise InvalidArgumentError(
                f"Calling find on {self.schema.name!r} with a None or empty identifier "
                "is not valid"
            )
        return identifiers

    def _check_missing(
        self,
        requested: list[str],
        is_matched: Callable[[str], bool],
    ) -> None:
        missing = [value for value in requested if not is_matched(value)]
        if not missing:
            return
        if self.raise_not_found:
            raise DocumentNotFoundError(
                NotFoundPayload(
                    collection_name=self.schema.name,
                    requested=tuple(requested),
                    missing=tuple(missing),
                )
            )
        log.debug(
            "Returning partial result for %s; unmatched: %s",
            self.schema.name,
            missing,
        )


def _unique(documents: Iterable[Document]) -> list[Document]:
    seen: set[Document] = set()
    unique: list[Document] = []
    for document in documents:
        if document in seen:
            continue
        seen.add(document)
        unique.append(document)
    return unique


def _shape(documents: list[Document], *, multi: bool) -> FindResult:
    if multi:
        return documents
    return documents[0] if documents else None
