"""Services package - service class exports."""

from app.services.stats.service import StatsService

__all__ = [
    "StatsService",
]
