"""Document repository over a PyMongo collection.

Store errors (``pymongo.errors.PyMongoError``) are not translated; they reach the
caller of the resolver unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from bson import ObjectId

from slugfind.domain.model import Document, KeyType

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from pymongo.collection import Collection

    from slugfind.domain.model import CollectionSchema

type RawDocument = dict[str, Any]


class PyMongoDocumentRepository:
    def __init__(self, collection: Collection[RawDocument], schema: CollectionSchema) -> None:
        self.collection = collection
        self.schema = schema

    def add(self, document: Document) -> None:
        raw: RawDocument = dict(document.data)
        raw["_id"] = self._coerce_key(document.id)
        raw[self.schema.slug_field] = list(document.slugs)
        self.collection.insert_one(raw)

    def execute_in_set(self, field: str, values: Sequence[str], limit: int) -> list[Document]:
        cursor = self.collection.find({field: {"$in": list(values)}}).limit(limit)
        return [self._to_document(raw) for raw in cursor]

    def find_by_keys(self, keys: Sequence[object], limit: int) -> list[Document]:
        coerced = [self._coerce_key(key) for key in keys]
        cursor = self.collection.find({"_id": {"$in": coerced}}).limit(limit)
        return [self._to_document(raw) for raw in cursor]

    def _coerce_key(self, key: object) -> object:
        if (
            self.schema.key_field.type_tag == KeyType.OBJECT_ID
            and isinstance(key, str)
            and ObjectId.is_valid(key)
        ):
            return ObjectId(key)
        return key

    def _to_document(self, raw: Mapping[str, Any]) -> Document:
        data = {
            name: value
            for name, value in raw.items()
            if name not in {"_id", self.schema.slug_field}
        }
        slugs = raw.get(self.schema.slug_field) or ()
        if isinstance(slugs, str):
            slugs = (slugs,)
        return Document(id=raw["_id"], slugs=tuple(str(slug) for slug in slugs), data=data)


if TYPE_CHECKING:
    from typing import cast

    from slugfind.domain.model import CollectionSchema as _Schema
    from slugfind.domain.ports import DocumentRepository

    _collection_stub = cast("Collection[RawDocument]", object())
    _repo_check: DocumentRepository = PyMongoDocumentRepository(
        _collection_stub, _Schema(name="check")
    )
