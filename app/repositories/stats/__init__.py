"""Stats repositories."""

from app.repositories.stats.views import ViewRepository

__all__ = ["ViewRepository"]
