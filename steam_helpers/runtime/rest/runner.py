"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .request import RequestSpec
from .transport import RESTTransport


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    def build_request(self, spec: RestEndpointSpec, params: dict[str, Any]) -> RequestSpec:
        query = spec.build_query(params) if spec.build_query else {}
        return RequestSpec(uri=spec.build_path(params), method=spec.method, query_params=query)

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        data = await self._t.fetch_json(self.build_request(spec, params))
        return adapter.parse(data, params)
