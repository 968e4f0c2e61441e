"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class SteamAPIError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidArgumentError(SteamAPIError, ValueError):
    """A caller-supplied argument is malformed or missing."""

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


class NotFoundError(SteamAPIError):
    """The response does not contain the record requested for a key."""

    def __init__(self, message: str, key: Any = None) -> None:
        super().__init__(message)
        self.key = key


class MalformedResponseError(SteamAPIError):
    """An expected container field is absent from an otherwise successful response."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class TransportError(SteamAPIError):
    """Network failure, non-JSON response or undecodable body."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
