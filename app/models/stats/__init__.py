"""Stats domain models - post views and visitor classification."""

from app.models.stats.entities import (
    GUEST_USER_ID,
    Browser,
    ClientInfo,
    Device,
    ViewRecord,
    VisitorIdentity,
)
from app.models.stats.view import (
    POST_VIEW_DDL,
    POST_VIEW_INDEXES,
    POST_VIEW_SEQUENCE_DDL,
    POST_VIEW_TABLE,
)

__all__ = [
    "POST_VIEW_TABLE",
    "POST_VIEW_SEQUENCE_DDL",
    "POST_VIEW_DDL",
    "POST_VIEW_INDEXES",
    "GUEST_USER_ID",
    "Browser",
    "Device",
    "ClientInfo",
    "VisitorIdentity",
    "ViewRecord",
]
