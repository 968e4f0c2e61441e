#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from steam_helpers import MalformedResponseError, create_steam_api

TF2_APPID = "440"
STRANGE_QUALITY = 11


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Count strange items in a TF2 backpack")
    p.add_argument("steamid", nargs="?", default="76561198080179568")
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with create_steam_api(os.environ["STEAM_API_KEY"]) as api:
        try:
            backpack = await api.get_backpack(TF2_APPID, args.steamid)
        except MalformedResponseError as e:
            print(f"Backpack failed to load: {e}")
            return

    strange = [item for item in backpack.items if item.get("quality") == STRANGE_QUALITY]
    if not strange:
        print("You don't have any strange items in your inventory!")
    else:
        print(f"You have {len(strange)} strange items in your inventory")


if __name__ == "__main__":
    asyncio.run(main())
