"""IEconItems_<appid>/GetPlayerItems endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from steam_helpers.core import MalformedResponseError
from steam_helpers.models import Backpack
from steam_helpers.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the backpack URI."""
    return f"{params['api_base_url']}/IEconItems_{params['appid']}/GetPlayerItems/v0001/"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the backpack endpoint."""
    return {
        "SteamID": params["steamid"],
        "key": params["key"],
        **(params.get("options") or {}),
    }


SPEC = RestEndpointSpec(
    id="player_items",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> Backpack:
        result = response.get("result") if isinstance(response, dict) else None
        if not isinstance(result, dict) or result.get("items") is None:
            raise MalformedResponseError("No items in response object", field="items")
        return Backpack.model_validate(result)
