"""Domain model for slug-aware document lookups (pure, dependency-light)."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Final

type Identifier = object
type SlugStrategy = Callable[[str], bool]
"""Answer "does this string look like a primary key (and not a slug)?"."""

DEFAULT_SLUG_FIELD: Final[str] = "_slugs"


class KeyType(StrEnum):
    OBJECT_ID = "object_id"
    STRING = "string"
    UUID = "uuid"
    INTEGER = "integer"


@dataclass(frozen=True, slots=True)
class KeyField:
    """Primary key descriptor of a collection.

    ``type`` is usually a :class:`KeyType`; plain string tags are accepted for key
    types the strategy registry does not know about. ``slug_id_strategy`` overrides
    the registry lookup entirely when set.
    """

    type: KeyType | str = KeyType.OBJECT_ID
    slug_id_strategy: SlugStrategy | None = None

    @property
    def type_tag(self) -> str:
        return str(self.type).lower()


@dataclass(frozen=True, slots=True)
class CollectionSchema:
    name: str
    key_field: KeyField = field(default_factory=KeyField)
    slug_field: str = DEFAULT_SLUG_FIELD

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("collection name must not be empty")
        if not self.slug_field:
            raise ValueError("slug field must not be empty")

    @property
    def cache_key(self) -> tuple[str, str, SlugStrategy | None]:
        return (self.name, self.key_field.type_tag, self.key_field.slug_id_strategy)


@dataclass(frozen=True, slots=True, eq=False)
class Document:
    """A stored document as seen by the resolver.

    Identity is the primary key: two instances with the same ``id`` are the same
    document, whatever alias they were matched through.
    """

    id: object
    slugs: tuple[str, ...] = ()
    data: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "slugs", tuple(self.slugs))
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def slug(self) -> str | None:
        """The current slug; older aliases follow it in ``slugs``."""
        return self.slugs[0] if self.slugs else None

    def to_dict(self) -> dict[str, object]:
        return {"id": str(self.id), "slugs": list(self.slugs), **self.data}
