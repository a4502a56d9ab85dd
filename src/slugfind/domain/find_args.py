"""Normalisation of ``find(*args)`` call arguments."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from slugfind.domain.model import Identifier


@dataclass(frozen=True, slots=True)
class FindArgs:
    identifiers: tuple[Identifier, ...]
    multi: bool


def _is_collection(value: object) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping))


def _flatten(values: Iterable[object]) -> Iterator[object]:
    for value in values:
        if _is_collection(value):
            yield from _flatten(value)  # pyright: ignore[reportArgumentType]
        else:
            yield value


def normalize_find_args(args: tuple[object, ...]) -> FindArgs:
    """Flatten the arguments of a find call and detect its call shape.

    Duplicates and order are kept. The call is "multi" when several arguments were
    passed or when the first argument is itself a collection of identifiers, so
    ``find(["a"])`` yields a list while ``find("a")`` yields a bare document.
    """

    multi = len(args) > 1 or (bool(args) and _is_collection(args[0]))
    return FindArgs(identifiers=tuple(_flatten(args)), multi=multi)
