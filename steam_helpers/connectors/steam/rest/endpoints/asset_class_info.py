"""ISteamEconomy/GetAssetClassInfo endpoint definition and adapter.

One call describes ``class_count`` classids passed as ``classid0``,
``classid1``, ... The result maps each classid to its classinfo, next to a
``success`` flag.
"""

from __future__ import annotations

from typing import Any

from steam_helpers.core import MalformedResponseError
from steam_helpers.runtime.rest import ResponseAdapter, RestEndpointSpec
from steam_helpers.transform import normalize_classinfo


def build_path(params: dict[str, Any]) -> str:
    """Build the classinfo URI."""
    return f"{params['api_base_url']}/ISteamEconomy/GetAssetClassInfo/v0001"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the classinfo endpoint."""
    classids = list(params["classids"])
    query: dict[str, Any] = {
        "appid": params["appid"],
        "key": params["key"],
        "class_count": len(classids),
    }
    query.update({f"classid{i}": classid for i, classid in enumerate(classids)})
    query.update(params.get("options") or {})
    return query


SPEC = RestEndpointSpec(
    id="asset_class_info",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter turning a classinfo response into ``{classid: classinfo}``."""

    def parse(self, response: Any, params: dict[str, Any]) -> dict[str, dict[str, Any]]:
        """Parse a GetAssetClassInfo response.

        The ``success`` flag is dropped; a response explicitly flagged as
        unsuccessful is rejected.

        Raises:
            MalformedResponseError: If ``result`` is missing or not successful
        """
        result = response.get("result") if isinstance(response, dict) else None
        if not isinstance(result, dict):
            raise MalformedResponseError("No result in classinfo response", field="result")

        if "success" in result and not result["success"]:
            raise MalformedResponseError(
                f"Classinfo request for appid {params['appid']} was not successful",
                field="success",
            )

        return {
            str(classid): normalize_classinfo(value)
            for classid, value in result.items()
            if classid != "success" and isinstance(value, dict)
        }
