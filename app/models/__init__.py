"""Models package - DDL and entities for all domains."""

from app.models.common import CACHE_DDL, META_DDL, BaseEntity
from app.models.stats import (
    GUEST_USER_ID,
    POST_VIEW_DDL,
    POST_VIEW_INDEXES,
    POST_VIEW_SEQUENCE_DDL,
    POST_VIEW_TABLE,
    Browser,
    ClientInfo,
    Device,
    ViewRecord,
    VisitorIdentity,
)

ALL_DDL = [
    # Stats
    POST_VIEW_SEQUENCE_DDL,
    POST_VIEW_DDL,
    *POST_VIEW_INDEXES,
    # Common
    CACHE_DDL,
    META_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "CACHE_DDL",
    "META_DDL",
    # Stats
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
    # All DDL
    "ALL_DDL",
]
