"""Thin REST transport over HTTPClient."""

from __future__ import annotations

from typing import Any

from .http_client import HTTPClient
from .request import RequestSpec, encode_query


class RESTTransport:
    def __init__(self, timeout: float = 30.0) -> None:
        self._http = HTTPClient(timeout=timeout)

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.get(path, params=encode_query(params), headers=headers)

    async def fetch_json(self, spec: RequestSpec) -> Any:
        """Issue the request described by ``spec`` and return the decoded JSON."""
        if spec.method.upper() != "GET":
            raise ValueError(f"Unsupported method: {spec.method}")
        return await self.get(spec.uri, params=spec.query_params)

    async def close(self) -> None:
        await self._http.close()
