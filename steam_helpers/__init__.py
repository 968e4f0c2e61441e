"""Steam Helpers - async helpers for the Steam web API."""

from .connectors.steam import SteamAPI, create_steam_api
from .core import (
    InvalidArgumentError,
    MalformedResponseError,
    NotFoundError,
    SteamAPIError,
    TransportError,
)
from .models import Backpack, TradeHistory, TradeHistoryOptions, UGCFileDetails
from .runtime.batching import BatchPolicy, run_series
from .transform import join_descriptions, merge_trade_history_descriptions, normalize
from .utils import chunk, dedupe, group_by, index_by

__version__ = "0.1.0"

__all__ = [
    # Client
    "SteamAPI",
    "create_steam_api",
    # Models
    "Backpack",
    "TradeHistory",
    "TradeHistoryOptions",
    "UGCFileDetails",
    # Batching and joining
    "BatchPolicy",
    "run_series",
    "chunk",
    "dedupe",
    "group_by",
    "index_by",
    "join_descriptions",
    "merge_trade_history_descriptions",
    "normalize",
    # Exceptions
    "SteamAPIError",
    "InvalidArgumentError",
    "NotFoundError",
    "MalformedResponseError",
    "TransportError",
]
