"""SQLAlchemy adapter package for slugfind."""

from __future__ import annotations

from .mappings import create_all_tables, document_slug_table, document_table, metadata
from .repositories import SqlAlchemyDocumentRepository
from .unit_of_work import SqlAlchemyUnitOfWork, StartupError, shutdown, startup

__all__ = [
    "SqlAlchemyDocumentRepository",
    "SqlAlchemyUnitOfWork",
    "StartupError",
    "create_all_tables",
    "document_slug_table",
    "document_table",
    "metadata",
    "shutdown",
    "startup",
]
