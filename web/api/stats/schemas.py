"""Stats API request and response schemas."""

from pydantic import BaseModel, Field


class TrackViewRequest(BaseModel):
    """Raw tracking signals handed over by the web layer."""

    post_id: int | str | None = None
    user_id: int | None = None
    forwarded_for: str | None = None
    client_ip: str | None = None
    remote_addr: str | None = None
    user_agent: str = ""


class TrackViewResponse(BaseModel):
    """Tracking outcome; tracking is fire-and-forget for the visitor."""

    success: bool
    error: str | None = None


class PostViewsResponse(BaseModel):
    """View count response."""

    post_id: int
    views: int = Field(ge=0)


class ClientBreakdownItem(BaseModel):
    """Views for one browser/device pair."""

    browser: str
    device: str
    views: int


class ClientBreakdownResponse(BaseModel):
    """Browser/device breakdown response."""

    post_id: int
    items: list[ClientBreakdownItem]
    total_views: int


class DatabaseStatusResponse(BaseModel):
    """Whether the stats tables are installed."""

    db_path: str
    table_exists: bool
    schema_version: str | None = None
