"""Unit tests for Steam endpoint specs and adapters."""

from __future__ import annotations

import pytest

from steam_helpers.connectors.steam.rest.endpoints import (
    AssetClassInfoAdapter,
    AssetClassInfoSpec,
    InventoryAdapter,
    InventorySpec,
    PlayerItemsAdapter,
    PlayerItemsSpec,
    TradeHistoryAdapter,
    TradeHistorySpec,
    UGCFileDetailsAdapter,
    UGCFileDetailsSpec,
    get_endpoint_adapter,
    get_endpoint_spec,
    list_endpoints,
)
from steam_helpers.core import MalformedResponseError, NotFoundError
from steam_helpers.models import Backpack, TradeHistory, TradeHistoryOptions, UGCFileDetails

BASE = {
    "key": "KEY",
    "api_base_url": "https://api.steampowered.com",
    "community_base_url": "https://steamcommunity.com",
}


def test_registry():
    assert set(list_endpoints()) == {
        "asset_class_info",
        "player_items",
        "inventory",
        "ugc_file_details",
        "trade_history",
    }
    assert get_endpoint_spec("inventory") is InventorySpec
    assert get_endpoint_adapter("inventory") is InventoryAdapter
    assert get_endpoint_spec("missing") is None
    assert get_endpoint_adapter("missing") is None


class TestAssetClassInfo:
    """Test the GetAssetClassInfo endpoint."""

    def test_build_query(self):
        params = {**BASE, "appid": 440, "classids": ("11", "22"), "options": {"language": "en"}}

        assert AssetClassInfoSpec.build_path(params) == (
            "https://api.steampowered.com/ISteamEconomy/GetAssetClassInfo/v0001"
        )
        assert AssetClassInfoSpec.build_query(params) == {
            "appid": 440,
            "key": "KEY",
            "class_count": 2,
            "classid0": "11",
            "classid1": "22",
            "language": "en",
        }

    def test_caller_options_override(self):
        params = {**BASE, "appid": 440, "classids": ["11"], "options": {"class_count": 5}}
        assert AssetClassInfoSpec.build_query(params)["class_count"] == 5

    def test_parse_drops_success_and_normalizes(self):
        response = {
            "result": {
                "11": {"classid": "11", "tags": {"0": {"name": "Key"}}},
                "22": {"classid": "22", "actions": []},
                "success": True,
            }
        }

        result = AssetClassInfoAdapter().parse(response, {"appid": 440})

        assert result == {
            "11": {"classid": "11", "tags": [{"name": "Key"}]},
            "22": {"classid": "22", "actions": []},
        }

    def test_parse_rejects_unsuccessful(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            AssetClassInfoAdapter().parse({"result": {"success": False}}, {"appid": 440})
        assert exc_info.value.field == "success"

    def test_parse_missing_result(self):
        with pytest.raises(MalformedResponseError):
            AssetClassInfoAdapter().parse({}, {"appid": 440})


class TestPlayerItems:
    """Test the GetPlayerItems endpoint."""

    def test_build(self):
        params = {**BASE, "appid": 440, "steamid": "7656", "options": None}

        assert PlayerItemsSpec.build_path(params) == (
            "https://api.steampowered.com/IEconItems_440/GetPlayerItems/v0001/"
        )
        assert PlayerItemsSpec.build_query(params) == {"SteamID": "7656", "key": "KEY"}

    def test_parse(self):
        response = {"result": {"status": 1, "num_backpack_items": 300, "items": [{"id": 1}]}}

        backpack = PlayerItemsAdapter().parse(response, {})

        assert isinstance(backpack, Backpack)
        assert backpack.num_backpack_items == 300
        assert backpack.items == [{"id": 1}]

    def test_parse_empty_items_is_valid(self):
        assert PlayerItemsAdapter().parse({"result": {"items": []}}, {}).items == []

    @pytest.mark.parametrize("response", [{}, {"result": {"status": 15}}, {"result": None}])
    def test_parse_without_items(self, response):
        with pytest.raises(MalformedResponseError, match="No items"):
            PlayerItemsAdapter().parse(response, {})


class TestInventory:
    """Test the community inventory endpoint."""

    def test_build(self):
        params = {**BASE, "appid": 730, "contextid": 2, "steamid": "7656", "options": {"count": 10}}

        assert InventorySpec.build_path(params) == "https://steamcommunity.com/inventory/7656/730/2"
        assert InventorySpec.build_query(params) == {"l": "english", "count": 10}

    def test_parse_merges_descriptions(self):
        response = {
            "assets": [
                {"assetid": "1", "classid": "10", "instanceid": "0", "amount": "1"},
                {"assetid": "2", "classid": "10", "instanceid": "7", "amount": "1"},
                {"assetid": "3", "classid": "30", "instanceid": "0", "amount": "1"},
            ],
            "descriptions": [
                {"classid": "10", "instanceid": "0", "name": "Case"},
                {"classid": "10", "instanceid": "7", "name": "Sticker"},
            ],
            "total_inventory_count": 3,
        }

        items = InventoryAdapter().parse(response, {})

        assert [i["assetid"] for i in items] == ["1", "2", "3"]
        assert [i.get("name") for i in items] == ["Case", "Sticker", None]

    def test_parse_empty_inventory(self):
        assert InventoryAdapter().parse({"total_inventory_count": 0, "success": 1}, {}) == []

    def test_parse_without_assets(self):
        with pytest.raises(MalformedResponseError):
            InventoryAdapter().parse({"success": 1}, {})


class TestUGCFileDetails:
    """Test the GetUGCFileDetails endpoint."""

    def test_build_query(self):
        params = {**BASE, "appid": 440, "ugcid": "99", "steamid": None, "options": None}
        assert UGCFileDetailsSpec.build_query(params) == {
            "steamid": None,
            "appid": 440,
            "ugcid": "99",
            "key": "KEY",
        }

    def test_parse(self):
        response = {"data": {"filename": "a.png", "url": "https://x/a.png", "size": 10}}

        details = UGCFileDetailsAdapter().parse(response, {"ugcid": "99"})

        assert isinstance(details, UGCFileDetails)
        assert details.size == 10

    def test_parse_not_found(self):
        with pytest.raises(NotFoundError) as exc_info:
            UGCFileDetailsAdapter().parse({"status": {"code": 9}}, {"ugcid": "99"})
        assert exc_info.value.key == "99"

    def test_parse_without_data(self):
        with pytest.raises(MalformedResponseError):
            UGCFileDetailsAdapter().parse({"status": {"code": 1}}, {"ugcid": "99"})

    def test_parse_empty_data(self):
        details = UGCFileDetailsAdapter().parse({"data": {}}, {"ugcid": "99"})

        assert isinstance(details, UGCFileDetails)
        assert details.filename is None


class TestTradeHistory:
    """Test the GetTradeHistory endpoint."""

    def _response(self):
        return {
            "response": {
                "more": True,
                "trades": [
                    {"tradeid": "1", "assets_received": [{"appid": 440, "classid": "5"}]},
                ],
                "descriptions": [{"appid": 440, "classid": "5", "name": "Key"}],
            }
        }

    def test_build_query_never_sends_combine_flag(self):
        params = {
            **BASE,
            "options": TradeHistoryOptions(max_trades=10, combine_descriptions=True),
        }
        assert TradeHistorySpec.build_query(params) == {"key": "KEY", "max_trades": 10}

    def test_parse_plain(self):
        history = TradeHistoryAdapter().parse(
            self._response(), {"options": TradeHistoryOptions()}
        )

        assert isinstance(history, TradeHistory)
        assert history.more is True
        assert history.descriptions == [{"appid": 440, "classid": "5", "name": "Key"}]
        assert "name" not in history.trades[0]["assets_received"][0]

    def test_parse_combined(self):
        history = TradeHistoryAdapter().parse(
            self._response(), {"options": TradeHistoryOptions(combine_descriptions=True)}
        )

        assert history.descriptions is None
        assert history.trades[0]["assets_received"][0]["name"] == "Key"

    def test_parse_without_envelope(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            TradeHistoryAdapter().parse({}, {"options": TradeHistoryOptions()})
        assert exc_info.value.field == "response"

    def test_parse_empty_envelope(self):
        history = TradeHistoryAdapter().parse(
            {"response": {}}, {"options": TradeHistoryOptions(combine_descriptions=True)}
        )

        assert history.trades == []
        assert history.more is False
