"""Steam web API connector.

This connector exposes the Steam endpoints as async methods. Each method
resolves its endpoint spec and adapter from the registry and runs the
request through RestRunner; the batched classinfo lookup additionally plans
and executes its requests through the sequential batching layer.

Architecture:
    SteamAPI -> endpoint registry (spec + adapter) -> RestRunner
             -> RESTTransport.fetch_json -> HTTPClient (aiohttp)
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from steam_helpers.core import InvalidArgumentError, NotFoundError
from steam_helpers.models import Backpack, TradeHistory, TradeHistoryOptions, UGCFileDetails
from steam_helpers.runtime.batching import BatchPlan, BatchPlanner, BatchPolicy, SeriesExecutor
from steam_helpers.runtime.rest import RequestSpec, RestRunner, RESTTransport

from .config import (
    API_BASE_URL,
    CLASSINFO_CHUNK_SIZE,
    CLASSINFO_REQUEST_DELAY,
    COMMUNITY_BASE_URL,
    DEFAULT_TIMEOUT,
)
from .rest.endpoints import get_endpoint_adapter, get_endpoint_spec

logger = logging.getLogger(__name__)


def _require(value: Any, name: str) -> None:
    if value is None or value == "":
        raise InvalidArgumentError(f"Missing required identifier: {name}", argument=name)


class SteamAPI:
    """Async interface to the Steam web API.

    Use as an async context manager, or call ``close()`` when done, so the
    underlying HTTP session is released.
    """

    def __init__(
        self,
        api_key: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        api_base_url: str = API_BASE_URL,
        community_base_url: str = COMMUNITY_BASE_URL,
    ) -> None:
        """Initialize Steam connector.

        Args:
            api_key: Steam web API key sent with every api.steampowered.com call
            timeout: Total timeout in seconds for a single HTTP request
            api_base_url: Base URL of the web API host
            community_base_url: Base URL of the community host (inventories)
        """
        self._api_key = api_key
        self._api_base_url = api_base_url.rstrip("/")
        self._community_base_url = community_base_url.rstrip("/")
        self._transport = RESTTransport(timeout=timeout)
        self._runner = RestRunner(self._transport)

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch data from a Steam REST endpoint.

        Args:
            endpoint_id: Endpoint identifier (e.g., "inventory", "trade_history")
            params: Request parameters

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        params = {
            **params,
            "key": self._api_key,
            "api_base_url": self._api_base_url,
            "community_base_url": self._community_base_url,
        }

        adapter = adapter_cls()
        return await self._runner.run(spec=spec, adapter=adapter, params=params)

    async def request(self, uri: str, options: Mapping[str, Any] | None = None) -> Any:
        """Issue a GET to any web API URI with the API key attached.

        Args:
            uri: Absolute URI
            options: Query parameters sent along with ``key``

        Returns:
            Decoded JSON response, unmodified
        """
        _require(uri, "uri")
        spec = RequestSpec(uri=uri, query_params={"key": self._api_key, **(options or {})})
        return await self._transport.fetch_json(spec)

    async def get_asset_class_info(
        self,
        appid: int | str,
        classid: int | str,
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Fetch the classinfo for a single classid.

        Raises:
            InvalidArgumentError: If appid or classid is missing
            NotFoundError: If the response has no classinfo for the classid
        """
        _require(appid, "appid")
        _require(classid, "classid")

        classinfos = await self.fetch(
            "asset_class_info", {"appid": appid, "classids": [classid], "options": options}
        )
        classinfo = classinfos.get(str(classid))
        if classinfo is None:
            raise NotFoundError(f'No classinfo for "{classid}"', key=classid)
        return classinfo

    async def get_asset_class_infos(
        self,
        appid: int | str,
        classids: Iterable[int | str],
        options: Mapping[str, Any] | None = None,
        *,
        chunk_size: int = CLASSINFO_CHUNK_SIZE,
        delay: float = CLASSINFO_REQUEST_DELAY,
    ) -> dict[str, dict[str, Any]]:
        """Fetch classinfos for many classids.

        Classids are deduplicated, split into groups of ``chunk_size`` and
        requested one group at a time with ``delay`` seconds between calls.
        Any failing call aborts the whole lookup.

        Args:
            appid: Appid the classids belong to
            classids: Classids to look up, duplicates allowed
            options: Extra query parameters sent with every call
            chunk_size: Maximum classids per call
            delay: Seconds to wait between calls

        Returns:
            Mapping of classid (as a string) to its classinfo
        """
        _require(appid, "appid")
        policy = BatchPolicy(chunk_size=chunk_size, delay=delay)
        plans = BatchPlanner(policy, endpoint_id="asset_class_info").plan(classids, key=str)

        async def fetch_batch(plan: BatchPlan) -> dict[str, dict[str, Any]]:
            return await self.fetch(
                "asset_class_info",
                {"appid": appid, "classids": plan.ids, "options": options},
            )

        result = await SeriesExecutor(policy).execute(plans=plans, fetch_batch=fetch_batch)

        classinfos: dict[str, dict[str, Any]] = {}
        for batch in result.results:
            classinfos.update(batch)

        missing = [
            classid for plan in plans for classid in plan.ids if str(classid) not in classinfos
        ]
        if missing:
            logger.warning(
                "classinfo_missing",
                extra={"appid": appid, "missing": _preview(missing), "count": len(missing)},
            )

        return classinfos

    async def get_backpack(
        self,
        appid: int | str,
        steamid: str,
        options: Mapping[str, Any] | None = None,
    ) -> Backpack:
        """Fetch the backpack of a user for an app.

        Raises:
            MalformedResponseError: If the response carries no items
        """
        _require(appid, "appid")
        _require(steamid, "steamid")
        return await self.fetch(
            "player_items", {"appid": appid, "steamid": steamid, "options": options}
        )

    async def get_inventory(
        self,
        appid: int | str,
        contextid: int | str,
        steamid: str,
        options: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch a community inventory with descriptions merged onto each asset."""
        _require(appid, "appid")
        _require(contextid, "contextid")
        _require(steamid, "steamid")
        return await self.fetch(
            "inventory",
            {"appid": appid, "contextid": contextid, "steamid": steamid, "options": options},
        )

    async def get_ugc_file_details(
        self,
        appid: int | str,
        ugcid: int | str,
        steamid: str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> UGCFileDetails:
        """Fetch the details of a UGC file.

        Raises:
            NotFoundError: If Steam does not know the UGC id
            MalformedResponseError: If the response carries no data
        """
        _require(appid, "appid")
        _require(ugcid, "ugcid")
        return await self.fetch(
            "ugc_file_details",
            {"appid": appid, "ugcid": ugcid, "steamid": steamid, "options": options},
        )

    async def get_trade_history(
        self,
        options: TradeHistoryOptions | Mapping[str, Any] | None = None,
    ) -> TradeHistory:
        """Fetch a page of the key owner's trade history.

        Args:
            options: Trade history options; ``combine_descriptions`` merges
                item descriptions into each traded asset

        Raises:
            InvalidArgumentError: If options fail validation
            MalformedResponseError: If the response envelope is missing
        """
        if not isinstance(options, TradeHistoryOptions):
            try:
                options = TradeHistoryOptions.model_validate(dict(options or {}))
            except ValidationError as e:
                raise InvalidArgumentError(str(e), argument="options") from e
        return await self.fetch("trade_history", {"options": options})

    async def close(self) -> None:
        """Release the HTTP session."""
        await self._transport.close()

    async def __aenter__(self) -> SteamAPI:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def _preview(ids: list[Hashable], limit: int = 10) -> list[str]:
    return [str(i) for i in ids[:limit]]


def create_steam_api(api_key: str, **kwargs: Any) -> SteamAPI:
    """Create a SteamAPI bound to ``api_key``.

    Keyword arguments are passed to SteamAPI.
    """
    return SteamAPI(api_key, **kwargs)
