"""In-memory document store, mainly for tests and embedding."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from slugfind.domain.model import Document


class InMemoryDocumentRepository:
    """Insertion-ordered store implementing both lookup ports.

    Slugs live on ``Document.slugs`` whatever the collection calls its slug field,
    so ``field`` only names the filter and does not change what is matched.
    """

    def __init__(self, documents: Sequence[Document] = ()) -> None:
        self._documents: dict[str, Document] = {}
        for document in documents:
            self.add(document)

    def add(self, document: Document) -> None:
        self._documents[str(document.id)] = document

    def execute_in_set(self, field: str, values: Sequence[str], limit: int) -> list[Document]:
        _ = field
        wanted = set(values)
        matches = [
            document for document in self._documents.values() if wanted.intersection(document.slugs)
        ]
        return matches[:limit]

    def find_by_keys(self, keys: Sequence[object], limit: int) -> list[Document]:
        wanted = {str(key) for key in keys}
        matches = [document for key, document in self._documents.items() if key in wanted]
        return matches[:limit]

    def __len__(self) -> int:
        return len(self._documents)


if TYPE_CHECKING:
    from slugfind.domain.ports import DocumentRepository

    _repo_check: DocumentRepository = InMemoryDocumentRepository()
