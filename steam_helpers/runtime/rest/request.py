"""Request description handed to the transport."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

QueryValue = str | int | float | bool | None


def encode_query(params: Mapping[str, QueryValue] | None) -> dict[str, str]:
    """Serialize scalar query values to strings.

    ``None`` values are dropped and booleans are written as ``true``/``false``.
    """
    if not params:
        return {}
    out: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            out[key] = "true" if value else "false"
        else:
            out[key] = str(value)
    return out


@dataclass(frozen=True)
class RequestSpec:
    """A single JSON request.

    Attributes:
        uri: Absolute URI, or a path relative to the transport base URL
        method: HTTP method (only GET is used by the Steam endpoints)
        query_params: Scalar query values, serialized with ``encode_query``
    """

    uri: str
    method: str = "GET"
    query_params: dict[str, Any] = field(default_factory=dict)
