"""Stats domain entities."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from app.models.common import BaseEntity

GUEST_USER_ID = 0


class Browser(StrEnum):
    INTERNET_EXPLORER = "Internet Explorer"
    FIREFOX = "Firefox"
    CHROME = "Chrome"
    SAFARI = "Safari"
    OPERA = "Opera"
    OTHER = "Other"


class Device(StrEnum):
    MOBILE = "Mobile"
    TABLET = "Tablet"
    DESKTOP = "Desktop"


@dataclass
class ClientInfo(BaseEntity):
    """Coarse browser/device classification of a user agent."""

    browser: Browser
    device: Device


@dataclass
class VisitorIdentity(BaseEntity):
    """Deduplication identity: guest visitors carry GUEST_USER_ID."""

    user_id: int
    ip_address: str

    @property
    def is_guest(self) -> bool:
        return self.user_id == GUEST_USER_ID


@dataclass
class ViewRecord(BaseEntity):
    """A cluster of views of one post by one identity."""

    post_id: int
    user_id: int
    ip_address: str
    user_agent: str
    browser: str
    device: str
    views_count: int
    created_at: datetime
    updated_at: datetime
    id: int | None = None
