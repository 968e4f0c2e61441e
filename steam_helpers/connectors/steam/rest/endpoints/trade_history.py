"""IEconService/GetTradeHistory endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from steam_helpers.core import MalformedResponseError
from steam_helpers.models import TradeHistory, TradeHistoryOptions
from steam_helpers.runtime.rest import ResponseAdapter, RestEndpointSpec
from steam_helpers.transform import merge_trade_history_descriptions


def build_path(params: dict[str, Any]) -> str:
    """Build the trade history URI."""
    return f"{params['api_base_url']}/IEconService/GetTradeHistory/v1/"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters; client-side options are not sent."""
    options: TradeHistoryOptions = params["options"]
    return {"key": params["key"], **options.to_query()}


SPEC = RestEndpointSpec(
    id="trade_history",
    method="GET",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter unwrapping the trade history envelope."""

    def parse(self, response: Any, params: dict[str, Any]) -> TradeHistory:
        """Parse a GetTradeHistory response.

        When ``combine_descriptions`` is set, every traded asset is merged
        with its description and the separate ``descriptions`` list is
        dropped.

        Raises:
            MalformedResponseError: If the ``response`` envelope is missing
        """
        envelope = response.get("response") if isinstance(response, dict) else None
        if not isinstance(envelope, dict):
            raise MalformedResponseError("No response data.", field="response")

        options: TradeHistoryOptions = params["options"]
        if options.combine_descriptions:
            envelope = merge_trade_history_descriptions(envelope)

        return TradeHistory.model_validate(envelope)
