"""Live tests against the Steam web API."""

from __future__ import annotations

import os

import pytest

from steam_helpers import SteamAPI

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.environ.get("RUN_STEAM_NETWORK_TESTS") != "1",
        reason="Requires network access. Set RUN_STEAM_NETWORK_TESTS=1 to run",
    ),
]

TF2_APPID = 440
# Mann Co. Supply Crate Key
KEY_CLASSID = "101785959"


@pytest.mark.asyncio
async def test_asset_class_info(api_key):
    async with SteamAPI(api_key) as api:
        classinfo = await api.get_asset_class_info(TF2_APPID, KEY_CLASSID)

    assert classinfo["classid"] == KEY_CLASSID
    assert isinstance(classinfo.get("tags", []), list)


@pytest.mark.asyncio
async def test_asset_class_infos_batches(api_key):
    async with SteamAPI(api_key) as api:
        classinfos = await api.get_asset_class_infos(
            TF2_APPID, [KEY_CLASSID, KEY_CLASSID], delay=0.5
        )

    assert KEY_CLASSID in classinfos
