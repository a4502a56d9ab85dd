"""Domain layer: model, ports, strategies and the resolver."""

from __future__ import annotations

from .errors import DocumentNotFoundError, InvalidArgumentError, NotFoundPayload, SlugFindError
from .find_args import FindArgs, normalize_find_args
from .model import (
    DEFAULT_SLUG_FIELD,
    CollectionSchema,
    Document,
    Identifier,
    KeyField,
    KeyType,
    SlugStrategy,
)
from .ports import (
    DocumentRepository,
    DocumentUnitOfWork,
    KeyLookup,
    QueryExecutor,
    StrategyProvider,
)
from .resolver import FindResult, SlugResolver
from .strategies import (
    DEFAULT_STRATEGY,
    STRATEGY_REGISTRY,
    RegistryStrategyProvider,
    StrategyCache,
)

__all__ = [
    "DEFAULT_SLUG_FIELD",
    "DEFAULT_STRATEGY",
    "STRATEGY_REGISTRY",
    "CollectionSchema",
    "Document",
    "DocumentNotFoundError",
    "DocumentRepository",
    "DocumentUnitOfWork",
    "FindArgs",
    "FindResult",
    "Identifier",
    "InvalidArgumentError",
    "KeyField",
    "KeyLookup",
    "KeyType",
    "NotFoundPayload",
    "QueryExecutor",
    "RegistryStrategyProvider",
    "SlugFindError",
    "SlugResolver",
    "SlugStrategy",
    "StrategyCache",
    "StrategyProvider",
    "normalize_find_args",
]
