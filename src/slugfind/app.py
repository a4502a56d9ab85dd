"""Application orchestration entry points."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from bson import ObjectId

from slugfind.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, is_started, startup
from slugfind.config import get_resolver_config
from slugfind.domain import (
    CollectionSchema,
    Document,
    DocumentUnitOfWork,
    KeyField,
    KeyType,
    SlugResolver,
    StrategyCache,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from slugfind.config import ResolverConfig
    from slugfind.domain import FindResult

UnitOfWorkFactory = Callable[[CollectionSchema], DocumentUnitOfWork]

log = getLogger(__name__)

_STRATEGY_CACHE = StrategyCache()


def collection_schema(
    collection: str, *, key_type: KeyType | str = KeyType.OBJECT_ID
) -> CollectionSchema:
    return CollectionSchema(name=collection, key_field=KeyField(type=key_type))


def new_key(key_type: KeyType | str) -> str:
    """Generate a primary key for key types that have a natural generator."""

    if key_type == KeyType.OBJECT_ID:
        return str(ObjectId())
    if key_type == KeyType.UUID:
        return str(uuid.uuid4())
    raise ValueError(f"Key type {key_type!r} needs an explicit key")


def add_document(
    collection: str,
    *,
    slugs: Sequence[str],
    key: str | None = None,
    key_type: KeyType | str = KeyType.OBJECT_ID,
    data: Mapping[str, object] | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> Document:
    """Store a document with its slugs (current slug first)."""

    schema = collection_schema(collection, key_type=key_type)
    effective_uow = unit_of_work_factory or _default_unit_of_work
    document = Document(id=key or new_key(key_type), slugs=tuple(slugs), data=data or {})
    with effective_uow(schema) as uow:
        uow.documents.add(document)
        uow.commit()
    log.info("Stored %s document %s with slugs %s", collection, document.id, list(slugs))
    return document


def find_documents(
    collection: str,
    identifiers: Sequence[str],
    *,
    key_type: KeyType | str = KeyType.OBJECT_ID,
    config: ResolverConfig | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> FindResult:
    """Resolve identifiers by key or slug.

    One identifier gives a bare document, several give a list.
    """

    schema = collection_schema(collection, key_type=key_type)
    effective_config = config or get_resolver_config()
    effective_uow = unit_of_work_factory or _default_unit_of_work
    log.info(
        "Finding %s in %s (raise_not_found=%s)",
        list(identifiers),
        collection,
        effective_config.raise_not_found,
    )
    with effective_uow(schema) as uow:
        resolver = SlugResolver(
            schema,
            uow.documents,
            uow.documents,
            raise_not_found=effective_config.raise_not_found,
            strategy_cache=_STRATEGY_CACHE,
        )
        if len(identifiers) == 1:
            return resolver.find(identifiers[0])
        return resolver.find(list(identifiers))


def _default_unit_of_work(schema: CollectionSchema) -> DocumentUnitOfWork:
    if not is_started():
        startup()
    return SqlAlchemyUnitOfWork(schema)
