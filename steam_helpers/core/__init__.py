"""Core components."""

from .exceptions import (
    InvalidArgumentError,
    MalformedResponseError,
    NotFoundError,
    SteamAPIError,
    TransportError,
)

__all__ = [
    "SteamAPIError",
    "InvalidArgumentError",
    "NotFoundError",
    "MalformedResponseError",
    "TransportError",
]
