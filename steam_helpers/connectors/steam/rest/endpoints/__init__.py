"""Steam REST endpoint registry.

This module collects the endpoint specifications and adapters from the
modular endpoint structure.
"""

from __future__ import annotations

from steam_helpers.runtime.rest import ResponseAdapter, RestEndpointSpec

from .asset_class_info import SPEC as AssetClassInfoSpec  # noqa: N811
from .asset_class_info import Adapter as AssetClassInfoAdapter
from .inventory import SPEC as InventorySpec  # noqa: N811
from .inventory import Adapter as InventoryAdapter
from .player_items import SPEC as PlayerItemsSpec  # noqa: N811
from .player_items import Adapter as PlayerItemsAdapter
from .trade_history import SPEC as TradeHistorySpec  # noqa: N811
from .trade_history import Adapter as TradeHistoryAdapter
from .ugc_file_details import SPEC as UGCFileDetailsSpec  # noqa: N811
from .ugc_file_details import Adapter as UGCFileDetailsAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "asset_class_info": (AssetClassInfoSpec, AssetClassInfoAdapter),
    "player_items": (PlayerItemsSpec, PlayerItemsAdapter),
    "inventory": (InventorySpec, InventoryAdapter),
    "ugc_file_details": (UGCFileDetailsSpec, UGCFileDetailsAdapter),
    "trade_history": (TradeHistorySpec, TradeHistoryAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "inventory", "trade_history")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID."""
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    """List all available endpoint IDs."""
    return list(_ENDPOINT_REGISTRY.keys())


__all__ = [
    "get_endpoint_spec",
    "get_endpoint_adapter",
    "list_endpoints",
    "AssetClassInfoSpec",
    "AssetClassInfoAdapter",
    "InventorySpec",
    "InventoryAdapter",
    "PlayerItemsSpec",
    "PlayerItemsAdapter",
    "TradeHistorySpec",
    "TradeHistoryAdapter",
    "UGCFileDetailsSpec",
    "UGCFileDetailsAdapter",
]
