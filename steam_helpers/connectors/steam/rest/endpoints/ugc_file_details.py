"""ISteamRemoteStorage/GetUGCFileDetails endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from steam_helpers.core import MalformedResponseError, NotFoundError
from steam_helpers.models import UGCFileDetails
from steam_helpers.runtime.rest import ResponseAdapter, RestEndpointSpec

from ...config import UGC_NOT_FOUND_CODE


def build_path(params: dict[str, Any]) -> str:
    """Build the UGC details URI."""
    return f"{params['api_base_url']}/ISteamRemoteStorage/GetUGCFileDetails/v1/"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters; ``steamid`` is dropped when not given."""
    return {
        "steamid": params.get("steamid"),
        "appid": params["appid"],
        "ugcid": params["ugcid"],
        "key": params["key"],
        **(params.get("options") or {}),
    }


SPEC = RestEndpointSpec(
    id="ugc_file_details",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> UGCFileDetails:
        if not isinstance(response, dict):
            raise MalformedResponseError("No response data.", field="data")

        status = response.get("status")
        if isinstance(status, dict) and status.get("code") == UGC_NOT_FOUND_CODE:
            raise NotFoundError(f"UGC id {params['ugcid']} not found", key=params["ugcid"])

        data = response.get("data")
        if not isinstance(data, dict):
            raise MalformedResponseError("No response data.", field="data")
        return UGCFileDetails.model_validate(data)
