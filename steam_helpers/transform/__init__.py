"""Response reshaping: list normalization and description joins."""

from .joiner import (
    TRADE_ASSET_FIELDS,
    build_lookup_table,
    join_descriptions,
    merge_trade_history_descriptions,
)
from .normalizer import CLASSINFO_ARRAYISH_FIELDS, normalize, normalize_classinfo

__all__ = [
    "CLASSINFO_ARRAYISH_FIELDS",
    "TRADE_ASSET_FIELDS",
    "build_lookup_table",
    "join_descriptions",
    "merge_trade_history_descriptions",
    "normalize",
    "normalize_classinfo",
]
