"""Backpack data model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Backpack(BaseModel):
    """A user's backpack for one app (``IEconItems_<appid>/GetPlayerItems``)."""

    items: list[dict[str, Any]] = Field(default_factory=list)
    status: int | None = None
    num_backpack_items: int | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
