"""Community inventory endpoint definition and adapter.

The inventory response lists ``assets`` and, separately, the
``descriptions`` they share. Assets reference a description by
``(classid, instanceid)``.
"""

from __future__ import annotations

from typing import Any

from steam_helpers.core import MalformedResponseError
from steam_helpers.runtime.rest import ResponseAdapter, RestEndpointSpec
from steam_helpers.transform import join_descriptions

from ...config import INVENTORY_LANGUAGE, INVENTORY_PAGE_SIZE


def build_path(params: dict[str, Any]) -> str:
    """Build the inventory URI."""
    return (
        f"{params['community_base_url']}/inventory/"
        f"{params['steamid']}/{params['appid']}/{params['contextid']}"
    )


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the inventory endpoint."""
    return {
        "l": INVENTORY_LANGUAGE,
        "count": INVENTORY_PAGE_SIZE,
        **(params.get("options") or {}),
    }


SPEC = RestEndpointSpec(
    id="inventory",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter merging inventory assets with their descriptions."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[dict[str, Any]]:
        """Parse an inventory response.

        Returns:
            One record per asset, in response order, carrying the fields of
            its description when one matches

        Raises:
            MalformedResponseError: If ``assets`` is missing from a non-empty
                inventory
        """
        if not isinstance(response, dict):
            raise MalformedResponseError("No inventory in response", field="assets")

        assets = response.get("assets")
        if assets is None:
            # Steam omits both collections for an empty inventory
            if response.get("total_inventory_count") == 0:
                return []
            raise MalformedResponseError("No assets in inventory response", field="assets")

        return join_descriptions(
            assets, response.get("descriptions") or [], "classid", "instanceid"
        )
