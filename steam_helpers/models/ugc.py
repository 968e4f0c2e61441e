"""UGC file details data model."""

from pydantic import BaseModel, ConfigDict


class UGCFileDetails(BaseModel):
    """Details for a user-generated content file."""

    filename: str | None = None
    url: str | None = None
    size: int | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
