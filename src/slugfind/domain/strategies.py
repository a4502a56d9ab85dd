"""Built-in slug strategies and the per-collection strategy cache.

A slug strategy answers whether a string looks like a primary key for a given key
type. The registry below maps key type tags to strategies; tags without an entry
fall back to :data:`DEFAULT_STRATEGY`, which treats every string as a slug. That
default is a conservative guess: it silently enables slug lookups for key types
nobody has written a strategy for.
"""

from __future__ import annotations

import logging
import threading
import uuid
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from bson import ObjectId

from slugfind.domain.model import KeyType

if TYPE_CHECKING:
    from collections.abc import Mapping

    from slugfind.domain.model import CollectionSchema, KeyField, SlugStrategy
    from slugfind.domain.ports import StrategyProvider

log = logging.getLogger(__name__)


def is_legal_object_id(value: str) -> bool:
    """A string is key-like if it is a legal 24 hex digit ObjectId."""
    return ObjectId.is_valid(value)


def always_key(value: str) -> bool:
    """String keys: every string may be a key, so slugs are never inferred."""
    _ = value
    return True


def is_uuid_string(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def never_key(value: str) -> bool:
    _ = value
    return False


def canonical_key(key_field: KeyField, key: object) -> str:
    """String form of ``key`` as the store reports it back on ``Document.id``.

    ObjectId hex and UUIDs are case-insensitive on input but always come back
    lowercase, so both sides of a key comparison go through here.
    """

    text = str(key)
    tag = key_field.type_tag
    if tag == KeyType.OBJECT_ID and ObjectId.is_valid(text):
        return str(ObjectId(text))
    if tag == KeyType.UUID and is_uuid_string(text):
        return str(uuid.UUID(text))
    return text


DEFAULT_STRATEGY: Final[SlugStrategy] = never_key

STRATEGY_REGISTRY: Final[Mapping[str, SlugStrategy]] = MappingProxyType(
    {
        KeyType.OBJECT_ID: is_legal_object_id,
        KeyType.STRING: always_key,
        KeyType.UUID: is_uuid_string,
        KeyType.INTEGER: DEFAULT_STRATEGY,
    }
)


class RegistryStrategyProvider:
    """Select a strategy from the key field override or a tag registry."""

    def __init__(
        self,
        registry: Mapping[str, SlugStrategy] | None = None,
        default: SlugStrategy = DEFAULT_STRATEGY,
    ) -> None:
        self._registry = dict(STRATEGY_REGISTRY if registry is None else registry)
        self._default = default

    def strategy_for(self, key_field: KeyField) -> tuple[SlugStrategy, bool]:
        if key_field.slug_id_strategy is not None:
            return key_field.slug_id_strategy, True
        strategy = self._registry.get(key_field.type_tag)
        if strategy is None:
            log.debug(
                "No slug strategy registered for key type %r; treating all strings as slugs",
                key_field.type_tag,
            )
            return self._default, False
        return strategy, False


class StrategyCache:
    """Memoise one strategy per collection and key type.

    Reads of an already built entry take no lock; the first build for a key
    happens exactly once under the lock.
    """

    def __init__(self, provider: StrategyProvider | None = None) -> None:
        self._provider: StrategyProvider = (
            provider if provider is not None else RegistryStrategyProvider()
        )
        self._strategies: dict[tuple[str, str, SlugStrategy | None], SlugStrategy] = {}
        self._lock = threading.Lock()

    def get(self, schema: CollectionSchema) -> SlugStrategy:
        key = schema.cache_key
        strategy = self._strategies.get(key)
        if strategy is not None:
            return strategy
        with self._lock:
            strategy = self._strategies.get(key)
            if strategy is None:
                strategy, overridden = self._provider.strategy_for(schema.key_field)
                log.debug(
                    "Built slug strategy for %s (key type %s, override=%s)",
                    schema.name,
                    schema.key_field.type_tag,
                    overridden,
                )
                self._strategies[key] = strategy
        return strategy

    def clear(self) -> None:
        with self._lock:
            self._strategies.clear()

    def __len__(self) -> int:
        return len(self._strategies)
