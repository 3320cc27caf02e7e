"""Stats API - view tracking and counts."""

from web.api.stats.views import (
    create_database,
    get_client_breakdown,
    get_database_status,
    get_post_views,
    track_view,
)

__all__ = [
    "track_view",
    "get_post_views",
    "get_client_breakdown",
    "get_database_status",
    "create_database",
]
