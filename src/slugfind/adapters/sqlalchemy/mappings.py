"""SQLAlchemy table metadata for the document store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import (
    JSON,
    Column,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

metadata = MetaData()


document_table = Table(
    "document",
    metadata,
    Column("pk", Integer, primary_key=True, autoincrement=True),
    Column("collection", String(255), nullable=False),
    Column("key", String(255), nullable=False),
    Column("data", JSON, nullable=False),
    UniqueConstraint("collection", "key", name="uq_document_collection_key"),
)

# Position 0 is the current slug; higher positions are historical aliases.
document_slug_table = Table(
    "document_slug",
    metadata,
    Column(
        "document_pk",
        Integer,
        ForeignKey("document.pk", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("position", Integer, primary_key=True),
    Column("collection", String(255), nullable=False),
    Column("slug", String(255), nullable=False),
)


def create_all_tables(engine: Engine) -> None:
    """Create the document tables if they do not exist yet."""

    log.debug("Creating document tables on %s", engine.url)
    metadata.create_all(engine, checkfirst=True)
