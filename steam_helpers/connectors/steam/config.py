"""Shared Steam connector constants.

This module centralizes hosts and request defaults used by the endpoint
definitions so the connector can stay small and focused.
"""

from __future__ import annotations

from ...runtime.batching import DEFAULT_BATCH_SIZE
from ...transform import CLASSINFO_ARRAYISH_FIELDS

API_BASE_URL = "https://api.steampowered.com"
COMMUNITY_BASE_URL = "https://steamcommunity.com"

# GetAssetClassInfo accepts a bounded number of classids per call
CLASSINFO_CHUNK_SIZE = DEFAULT_BATCH_SIZE
# Seconds between consecutive GetAssetClassInfo calls
CLASSINFO_REQUEST_DELAY = 2.0

INVENTORY_PAGE_SIZE = 5000
INVENTORY_LANGUAGE = "english"

# ISteamRemoteStorage status code for an unknown UGC id
UGC_NOT_FOUND_CODE = 9

DEFAULT_TIMEOUT = 30.0

__all__ = [
    "API_BASE_URL",
    "COMMUNITY_BASE_URL",
    "CLASSINFO_ARRAYISH_FIELDS",
    "CLASSINFO_CHUNK_SIZE",
    "CLASSINFO_REQUEST_DELAY",
    "INVENTORY_PAGE_SIZE",
    "INVENTORY_LANGUAGE",
    "UGC_NOT_FOUND_CODE",
    "DEFAULT_TIMEOUT",
]
