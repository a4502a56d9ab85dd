"""Document repository backed by a SQLAlchemy session."""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING, cast

from sqlalchemy import select

from slugfind.adapters.sqlalchemy.mappings import document_slug_table, document_table
from slugfind.domain.model import Document

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy import Select
    from sqlalchemy.orm import Session

    from slugfind.domain.model import CollectionSchema


class SqlAlchemyDocumentRepository:
    """Documents of one collection, slugs kept in a side table.

    Primary keys are stored in their string form; ``Document.id`` comes back as
    that string whatever the collection's key type is.
    """

    def __init__(self, session: Session, schema: CollectionSchema) -> None:
        self.session = session
        self.schema = schema

    def add(self, document: Document) -> None:
        result = self.session.execute(
            document_table.insert().values(
                collection=self.schema.name,
                key=str(document.id),
                data=dict(document.data),
            )
        )
        document_pk = result.inserted_primary_key[0]  # pyright: ignore[reportOptionalSubscript]
        if not document.slugs:
            return
        self.session.execute(
            document_slug_table.insert(),
            [
                {
                    "document_pk": document_pk,
                    "position": position,
                    "collection": self.schema.name,
                    "slug": slug,
                }
                for position, slug in enumerate(document.slugs)
            ],
        )

    def execute_in_set(self, field: str, values: Sequence[str], limit: int) -> list[Document]:
        if field != self.schema.slug_field:
            raise ValueError(
                f"Collection {self.schema.name!r} only indexes slugs in {self.schema.slug_field!r}, "
                f"not {field!r}"
            )
        if not values:
            return []
        matching = (
            select(document_slug_table.c.document_pk)
            .where(document_slug_table.c.collection == self.schema.name)
            .where(document_slug_table.c.slug.in_(list(values)))
            .distinct()
        )
        stmt = self._documents().where(document_table.c.pk.in_(matching)).limit(limit)
        return self._load(stmt)

    def find_by_keys(self, keys: Sequence[object], limit: int) -> list[Document]:
        if not keys:
            return []
        stmt = (
            self._documents()
            .where(document_table.c.key.in_([str(key) for key in keys]))
            .limit(limit)
        )
        return self._load(stmt)

    def _documents(self) -> Select[tuple[int, str, dict[str, object]]]:
        return (
            select(document_table.c.pk, document_table.c.key, document_table.c.data)
            .where(document_table.c.collection == self.schema.name)
            .order_by(document_table.c.pk)
        )

    def _load(self, stmt: Select[tuple[int, str, dict[str, object]]]) -> list[Document]:
        rows = self.session.execute(stmt).all()
        if not rows:
            return []
        slugs = self._slugs_for([row.pk for row in rows])
        return [
            Document(
                id=row.key,
                slugs=tuple(slugs.get(row.pk, ())),
                data=cast("dict[str, object]", row.data or {}),
            )
            for row in rows
        ]

    def _slugs_for(self, document_pks: list[int]) -> dict[int, list[str]]:
        stmt = (
            select(document_slug_table.c.document_pk, document_slug_table.c.slug)
            .where(document_slug_table.c.document_pk.in_(document_pks))
            .order_by(document_slug_table.c.document_pk, document_slug_table.c.position)
        )
        slugs: dict[int, list[str]] = defaultdict(list)
        for document_pk, slug in self.session.execute(stmt):
            slugs[document_pk].append(slug)
        return slugs


if TYPE_CHECKING:
    from slugfind.domain.model import CollectionSchema as _Schema
    from slugfind.domain.ports import DocumentRepository

    _session_stub = cast("Session", object())
    _repo_check: DocumentRepository = SqlAlchemyDocumentRepository(
        _session_stub, _Schema(name="check")
    )
