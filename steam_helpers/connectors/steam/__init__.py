"""Steam connector: endpoint definitions and the SteamAPI interface."""

from .provider import SteamAPI, create_steam_api

__all__ = ["SteamAPI", "create_steam_api"]
