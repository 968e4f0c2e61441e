"""Joining of items with their shared description records.

Steam responses ship items and their display data separately: inventory
assets reference descriptions by ``(classid, instanceid)`` and trade assets
by ``(appid, classid)``. The helpers here build a two-level lookup table from
the descriptions and shallow-merge each item with its match.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from typing import Any

from ..utils.sequences import KeySpec, group_by, index_by

LookupTable = dict[Hashable, dict[Hashable, Mapping[str, Any]]]

TRADE_ASSET_FIELDS: tuple[str, ...] = ("assets_given", "assets_received")


def build_lookup_table(
    records: Sequence[Mapping[str, Any]],
    outer_key: KeySpec,
    inner_key: KeySpec,
) -> LookupTable:
    """Build ``{outer: {inner: record}}``. The first record per pair wins."""
    return {
        outer: index_by(group, inner_key)
        for outer, group in group_by(records, outer_key).items()
    }


def _lookup(
    table: LookupTable, record: Mapping[str, Any], outer_key: str, inner_key: str
) -> Mapping[str, Any] | None:
    if outer_key not in record or inner_key not in record:
        return None
    return table.get(record[outer_key], {}).get(record[inner_key])


def join_descriptions(
    primary: Sequence[Mapping[str, Any]],
    secondary: Sequence[Mapping[str, Any]],
    outer_key: str,
    inner_key: str,
) -> list[dict[str, Any]]:
    """Merge every primary record with its matching secondary record.

    Args:
        primary: Records to enrich (assets, trade items)
        secondary: Description records to look up
        outer_key: Field grouping the descriptions (e.g. "classid")
        inner_key: Field indexing each group (e.g. "instanceid")

    Returns:
        New records, same length and order as ``primary``. Matched records
        are ``{**item, **description}``; unmatched ones are plain copies.
    """
    table = build_lookup_table(secondary, outer_key, inner_key)
    return _join_with_table(primary, table, outer_key, inner_key)


def _join_with_table(
    primary: Sequence[Mapping[str, Any]],
    table: LookupTable,
    outer_key: str,
    inner_key: str,
) -> list[dict[str, Any]]:
    out: list[dict[str, Any]] = []
    for item in primary:
        match = _lookup(table, item, outer_key, inner_key)
        out.append({**item, **match} if match is not None else {**item})
    return out


def merge_trade_history_descriptions(history: Mapping[str, Any]) -> dict[str, Any]:
    """Attach item descriptions to every asset of every trade.

    Descriptions are matched on ``(appid, classid)``. The returned mapping no
    longer carries ``descriptions``; ``history`` itself is left untouched.
    """
    table = build_lookup_table(history.get("descriptions") or [], "appid", "classid")

    trades = []
    for trade in history.get("trades") or []:
        merged = dict(trade)
        for field in TRADE_ASSET_FIELDS:
            if field in merged and merged[field] is not None:
                merged[field] = _join_with_table(merged[field], table, "appid", "classid")
        trades.append(merged)

    out = {k: v for k, v in history.items() if k != "descriptions"}
    out["trades"] = trades
    return out
