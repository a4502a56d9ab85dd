from __future__ import annotations

import threading
import time

import pytest
from bson import ObjectId

from slugfind.domain import (
    DEFAULT_STRATEGY,
    STRATEGY_REGISTRY,
    CollectionSchema,
    KeyField,
    KeyType,
    RegistryStrategyProvider,
    StrategyCache,
)
from slugfind.domain.model import SlugStrategy
from slugfind.domain.strategies import (
    always_key,
    canonical_key,
    is_legal_object_id,
    is_uuid_string,
    never_key,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("4ecbe2da7bd9a4b2a1000001", True),
        ("4ECBE2DA7BD9A4B2A1000001", True),
        ("4ecbe2da7bd9a4b2a100000", False),
        ("not-an-object-id-at-all!", False),
        ("", False),
        ("a-slug", False),
    ],
)
def test_is_legal_object_id(value: str, *, expected: bool) -> None:
    assert is_legal_object_id(value) is expected


def test_is_uuid_string() -> None:
    assert is_uuid_string("6f1c7a4e-3c1b-4c1d-9a39-2b5d0c1f9e11")
    assert not is_uuid_string("my-uuid-looking-slug")


def test_registry_covers_known_key_types() -> None:
    assert STRATEGY_REGISTRY[KeyType.OBJECT_ID] is is_legal_object_id
    assert STRATEGY_REGISTRY[KeyType.STRING] is always_key
    assert STRATEGY_REGISTRY[KeyType.UUID] is is_uuid_string
    assert STRATEGY_REGISTRY[KeyType.INTEGER] is DEFAULT_STRATEGY
    assert DEFAULT_STRATEGY is never_key


def test_provider_prefers_override() -> None:
    def override(value: str) -> bool:
        return value.startswith("id:")

    provider = RegistryStrategyProvider()
    strategy, overridden = provider.strategy_for(
        KeyField(type=KeyType.STRING, slug_id_strategy=override)
    )

    assert strategy is override
    assert overridden is True


def test_provider_selects_by_key_type() -> None:
    provider = RegistryStrategyProvider()

    strategy, overridden = provider.strategy_for(KeyField(type=KeyType.OBJECT_ID))

    assert strategy is is_legal_object_id
    assert overridden is False


def test_provider_accepts_plain_string_tags() -> None:
    provider = RegistryStrategyProvider()

    strategy, _ = provider.strategy_for(KeyField(type="OBJECT_ID"))

    assert strategy is is_legal_object_id


def test_provider_falls_back_to_default_for_unknown_types() -> None:
    provider = RegistryStrategyProvider()

    strategy, overridden = provider.strategy_for(KeyField(type="decimal"))

    assert strategy is never_key
    assert overridden is False
    assert strategy("anything") is False


def test_provider_with_custom_registry_and_default() -> None:
    provider = RegistryStrategyProvider(registry={"decimal": str.isdigit}, default=always_key)

    decimal_strategy, _ = provider.strategy_for(KeyField(type="decimal"))
    fallback, _ = provider.strategy_for(KeyField(type=KeyType.OBJECT_ID))

    assert decimal_strategy("123")
    assert fallback is always_key


class CountingProvider:
    def __init__(self, strategy: SlugStrategy, delay: float = 0.0) -> None:
        self.calls = 0
        self.strategy = strategy
        self.delay = delay
        self._lock = threading.Lock()

    def strategy_for(self, key_field: KeyField) -> tuple[SlugStrategy, bool]:
        _ = key_field
        with self._lock:
            self.calls += 1
        time.sleep(self.delay)
        return self.strategy, False


def test_cache_builds_strategy_once_per_collection() -> None:
    provider = CountingProvider(is_legal_object_id)
    cache = StrategyCache(provider)
    posts = CollectionSchema(name="posts")
    pages = CollectionSchema(name="pages")

    assert cache.get(posts) is is_legal_object_id
    assert cache.get(posts) is is_legal_object_id
    assert cache.get(pages) is is_legal_object_id

    assert provider.calls == 2
    assert len(cache) == 2


def test_cache_builds_once_under_concurrent_first_use() -> None:
    provider = CountingProvider(is_legal_object_id, delay=0.05)
    cache = StrategyCache(provider)
    schema = CollectionSchema(name="posts")
    barrier = threading.Barrier(8)
    results: list[SlugStrategy] = []

    def worker() -> None:
        barrier.wait()
        results.append(cache.get(schema))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert provider.calls == 1
    assert results == [is_legal_object_id] * 8


def test_cache_clear_forces_rebuild() -> None:
    provider = CountingProvider(always_key)
    cache = StrategyCache(provider)
    schema = CollectionSchema(name="posts", key_field=KeyField(type=KeyType.STRING))

    cache.get(schema)
    cache.clear()
    cache.get(schema)

    assert provider.calls == 2


def test_object_id_instances_are_valid_keys() -> None:
    assert is_legal_object_id(str(ObjectId()))


def test_cache_keeps_overrides_apart() -> None:
    def prefixed(value: str) -> bool:
        return value.startswith("id:")

    cache = StrategyCache()
    plain = CollectionSchema(name="things", key_field=KeyField(type=KeyType.STRING))
    overridden = CollectionSchema(
        name="things",
        key_field=KeyField(type=KeyType.STRING, slug_id_strategy=prefixed),
    )

    assert cache.get(plain) is always_key
    assert cache.get(overridden) is prefixed
    assert len(cache) == 2


@pytest.mark.parametrize(
    ("key_type", "key", "expected"),
    [
        (KeyType.OBJECT_ID, "4ECBE2DA7BD9A4B2A1000001", "4ecbe2da7bd9a4b2a1000001"),
        (KeyType.OBJECT_ID, ObjectId("4ecbe2da7bd9a4b2a1000001"), "4ecbe2da7bd9a4b2a1000001"),
        (KeyType.OBJECT_ID, "not-an-oid", "not-an-oid"),
        (
            KeyType.UUID,
            "6F1C7A4E-3C1B-4C1D-9A39-2B5D0C1F9E11",
            "6f1c7a4e-3c1b-4c1d-9a39-2b5d0c1f9e11",
        ),
        (KeyType.STRING, "ABC", "ABC"),
        (KeyType.INTEGER, 42, "42"),
    ],
)
def test_canonical_key(key_type: KeyType, key: object, expected: str) -> None:
    assert canonical_key(KeyField(type=key_type), key) == expected
