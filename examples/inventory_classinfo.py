#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from steam_helpers import create_steam_api


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="List an inventory and fetch full classinfo for every distinct class"
    )
    p.add_argument("steamid")
    p.add_argument("appid", nargs="?", type=int, default=730)
    p.add_argument("contextid", nargs="?", type=int, default=2)
    p.add_argument("--delay", type=float, default=2.0)
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with create_steam_api(os.environ["STEAM_API_KEY"]) as api:
        items = await api.get_inventory(args.appid, args.contextid, args.steamid)
        classinfos = await api.get_asset_class_infos(
            args.appid, [item["classid"] for item in items], delay=args.delay
        )

    print(f"{len(items)} items, {len(classinfos)} distinct classes")
    print(f"{'Asset':>14} | {'Name':40} | Tags")
    print("-" * 80)
    for item in items:
        classinfo = classinfos.get(item["classid"], {})
        tags = ", ".join(tag.get("name", "") for tag in classinfo.get("tags", []))
        print(f"{item['assetid']:>14} | {item.get('market_hash_name', '?'):40} | {tags}")


if __name__ == "__main__":
    asyncio.run(main())
