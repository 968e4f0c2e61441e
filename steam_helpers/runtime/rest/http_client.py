"""Async HTTP client returning decoded JSON bodies."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ...core.exceptions import TransportError

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class HTTPClient:
    """Async HTTP client wrapper.

    Any response whose content type is not JSON is treated as a failure,
    whatever its status code. Steam reports most API errors with JSON
    bodies, so the status code alone is not checked.
    """

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request.

        Raises:
            TransportError: On connection failure, timeout, a non-JSON
                response or an undecodable body
        """
        logger.debug("HTTP GET", extra={"url": url, "params": sorted(params or {})})

        try:
            async with self.session.get(url, params=params, headers=headers) as response:
                content_type = response.headers.get("Content-Type", "")
                if not content_type.startswith(JSON_CONTENT_TYPE):
                    body = await response.text()
                    raise TransportError(
                        response.reason or str(response.status or "") or body,
                        status_code=response.status,
                    )
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise TransportError(
                        f"Invalid JSON from {url}: {e}", status_code=response.status
                    ) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Request to {url} failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request to {url} timed out") from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
