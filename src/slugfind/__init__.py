"""Resolve documents by primary key or slug through one lookup call."""

from __future__ import annotations

from slugfind.domain import (
    CollectionSchema,
    Document,
    DocumentNotFoundError,
    InvalidArgumentError,
    KeyField,
    KeyType,
    NotFoundPayload,
    SlugFindError,
    SlugResolver,
)

__all__ = [
    "CollectionSchema",
    "Document",
    "DocumentNotFoundError",
    "InvalidArgumentError",
    "KeyField",
    "KeyType",
    "NotFoundPayload",
    "SlugFindError",
    "SlugResolver",
]
