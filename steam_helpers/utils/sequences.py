"""Sequence helpers used by the batching and joining layers.

All helpers are pure: they build new containers and never modify their
input. A ``key`` may be ``None`` (compare items by value), a field name
(compare ``item.get(key)``; a missing field counts as ``None``) or a
callable taking the item.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

from ..core.exceptions import InvalidArgumentError

T = TypeVar("T")

KeySpec = str | Callable[[Any], Hashable] | None


def _key_getter(key: KeySpec) -> Callable[[Any], Hashable]:
    if key is None:
        return lambda item: item
    if callable(key):
        return key
    return lambda item: item.get(key) if isinstance(item, Mapping) else getattr(item, key, None)


def dedupe(items: Iterable[T], key: KeySpec = None) -> list[T]:
    """Return the first occurrence of every distinct key, in input order.

    Args:
        items: Items to deduplicate
        key: Optional key derivation (field name or callable)

    Returns:
        New list with duplicates removed
    """
    get_key = _key_getter(key)
    seen: set[Hashable] = set()
    out: list[T] = []
    for item in items:
        value = get_key(item)
        if value in seen:
            continue
        seen.add(value)
        out.append(item)
    return out


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """Split ``items`` into consecutive groups of at most ``size`` elements.

    Every group except possibly the last holds exactly ``size`` elements.
    Empty input yields no groups.

    Raises:
        InvalidArgumentError: If size is not a positive integer
    """
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidArgumentError(
            f"Chunk size must be a positive integer, got {size!r}", argument="size"
        )
    items = list(items)
    return [items[i : i + size] for i in range(0, len(items), size)]


def group_by(items: Iterable[T], key: KeySpec) -> dict[Hashable, list[T]]:
    """Group items sharing the same derived key, preserving input order."""
    get_key = _key_getter(key)
    groups: dict[Hashable, list[T]] = {}
    for item in items:
        groups.setdefault(get_key(item), []).append(item)
    return groups


def index_by(items: Iterable[T], key: KeySpec) -> dict[Hashable, T]:
    """Index items by derived key. The first item seen for a key wins."""
    get_key = _key_getter(key)
    index: dict[Hashable, T] = {}
    for item in items:
        value = get_key(item)
        if value not in index:
            index[value] = item
    return index
