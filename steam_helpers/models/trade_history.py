"""Trade history data models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TradeHistoryOptions(BaseModel):
    """Query options for ``IEconService/GetTradeHistory``.

    ``combine_descriptions`` is handled client-side and never sent upstream.
    Options left unset are omitted from the request.
    """

    max_trades: int | None = Field(default=None, ge=0)
    start_after_time: int | None = None
    start_after_tradeid: str | int | None = None
    navigating_back: bool | None = None
    get_descriptions: bool | None = None
    language: str | None = None
    include_failed: bool | None = None
    include_total: bool | None = None
    combine_descriptions: bool = False

    model_config = ConfigDict(frozen=True, extra="allow")

    def to_query(self) -> dict[str, Any]:
        """Return the parameters to send upstream."""
        return self.model_dump(exclude_none=True, exclude={"combine_descriptions"})


class TradeHistory(BaseModel):
    """A page of trade history.

    When descriptions were combined into the trades, ``descriptions`` is
    ``None`` and every asset record carries its description fields.
    """

    trades: list[dict[str, Any]] = Field(default_factory=list)
    more: bool = False
    total_trades: int | None = None
    descriptions: list[dict[str, Any]] | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
