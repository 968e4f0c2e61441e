"""Normalization of sparse, map-shaped list fields.

The Steam API encodes some lists as objects keyed by index ("0", "2", ...)
when entries are sparse. Callers expect dense lists, so these fields are
rewritten as the list of their values.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

CLASSINFO_ARRAYISH_FIELDS: tuple[str, ...] = (
    "actions",
    "market_actions",
    "tags",
    "descriptions",
)


def normalize(record: Mapping[str, Any], arrayish_fields: Iterable[str]) -> dict[str, Any]:
    """Return a copy of ``record`` with map-shaped list fields made dense.

    Fields that are absent or already list-shaped are copied as they are.
    The input mapping is never modified, and normalizing twice gives the
    same result as normalizing once.
    """
    out = dict(record)
    for name in arrayish_fields:
        value = out.get(name)
        if isinstance(value, Mapping):
            out[name] = list(value.values())
    return out


def normalize_classinfo(classinfo: Mapping[str, Any]) -> dict[str, Any]:
    """Normalize a classinfo record."""
    return normalize(classinfo, CLASSINFO_ARRAYISH_FIELDS)
