"""Data models for structured Steam responses.

Architecture:
    Records that are shallow-merged with description data (classinfo,
    inventory assets, trade assets) stay plain dicts so that every upstream
    field survives the merge. Container responses are Pydantic v2 models,
    frozen, with ``extra="allow"`` so unknown upstream fields are kept.
"""

from .backpack import Backpack
from .trade_history import TradeHistory, TradeHistoryOptions
from .ugc import UGCFileDetails

__all__ = [
    "Backpack",
    "TradeHistory",
    "TradeHistoryOptions",
    "UGCFileDetails",
]
