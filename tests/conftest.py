from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from slugfind.adapters.memory import InMemoryDocumentRepository
from slugfind.adapters.sqlalchemy import create_all_tables
from slugfind.adapters.sqlalchemy.unit_of_work import SqlAlchemyUnitOfWork, shutdown, startup
from slugfind.domain import CollectionSchema, KeyField, KeyType
from tests.helpers.documents import make_document

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def posts_schema() -> CollectionSchema:
    return CollectionSchema(name="posts", key_field=KeyField(type=KeyType.OBJECT_ID))


@pytest.fixture
def memory_repository() -> InMemoryDocumentRepository:
    return InMemoryDocumentRepository(
        [
            make_document("first-post", "old-first-post"),
            make_document("second-post"),
            make_document("third-post"),
        ]
    )


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[CollectionSchema], SqlAlchemyUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory(schema: CollectionSchema) -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(schema)

    try:
        yield factory
    finally:
        shutdown()
