from __future__ import annotations

from typing import List, Mapping, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def keys(mapping: Mapping[K, V]) -> List[K]:
    """Return the keys of ``mapping`` as a new list, in iteration order."""
    return [key for key in mapping]


def values(mapping: Mapping[K, V]) -> List[V]:
    """
    Return the values of ``mapping`` as a new list.
    Position i holds the value for ``keys(mapping)[i]``.
    """
    return [mapping[key] for key in mapping]


__all__ = ["keys", "values"]
