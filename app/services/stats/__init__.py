"""Stats services - view tracking, identity and user agent classification."""

from app.services.stats.identity import resolve_identity, resolve_ip, sanitize
from app.services.stats.service import StatsService, utcnow
from app.services.stats.user_agent import classify

__all__ = [
    "StatsService",
    "classify",
    "resolve_identity",
    "resolve_ip",
    "sanitize",
    "utcnow",
]
