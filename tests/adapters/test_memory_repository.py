from __future__ import annotations

from slugfind.adapters.memory import InMemoryDocumentRepository
from slugfind.domain import DocumentRepository
from tests.helpers.documents import make_document


def test_memory_repository_satisfies_port(memory_repository: InMemoryDocumentRepository) -> None:
    assert isinstance(memory_repository, DocumentRepository)
    assert len(memory_repository) == 3


def test_execute_in_set_returns_each_document_once(
    memory_repository: InMemoryDocumentRepository,
) -> None:
    result = memory_repository.execute_in_set("_slugs", ["first-post", "old-first-post"], 2)

    assert [document.slug for document in result] == ["first-post"]


def test_execute_in_set_respects_limit(memory_repository: InMemoryDocumentRepository) -> None:
    result = memory_repository.execute_in_set(
        "_slugs", ["first-post", "second-post", "third-post"], 2
    )

    assert [document.slug for document in result] == ["first-post", "second-post"]


def test_find_by_keys_matches_string_form() -> None:
    document = make_document("a", key=42)
    repository = InMemoryDocumentRepository([document])

    assert repository.find_by_keys(["42"], 1) == [document]
    assert repository.find_by_keys([42], 1) == [document]
    assert repository.find_by_keys([43], 1) == []


def test_add_replaces_document_with_same_key() -> None:
    repository = InMemoryDocumentRepository([make_document("old", key="1")])

    repository.add(make_document("new", key="1"))

    assert len(repository) == 1
    assert repository.execute_in_set("_slugs", ["old"], 1) == []
