"""Cache repository - per-post view count storage with expiry."""

from datetime import datetime, timedelta

from loguru import logger

from app.repositories.base import BaseRepository


class CacheRepository(BaseRepository):
    """Repository for view count cache operations."""

    def get(self, post_id: int, now: datetime) -> int | None:
        """Load a cached count, None if absent or expired."""
        row = self.fetchone(
            "SELECT views FROM view_count_cache WHERE post_id = ? AND expires_at > ?",
            [post_id, now],
        )
        if row:
            logger.debug("Cache hit: post={}", post_id)
            return int(row[0])
        logger.debug("Cache miss: post={}", post_id)
        return None

    def set(self, post_id: int, views: int, now: datetime, ttl: int) -> None:
        """Save a count valid for ttl seconds from now."""
        self.execute(
            """
            INSERT OR REPLACE INTO view_count_cache (post_id, views, computed_at, expires_at)
            VALUES (?, ?, ?, ?)
            """,
            [post_id, views, now, now + timedelta(seconds=ttl)],
        )
        logger.debug("Cache saved: post={}, views={}", post_id, views)

    def invalidate(self, post_id: int) -> None:
        self.execute("DELETE FROM view_count_cache WHERE post_id = ?", [post_id])
        logger.debug("Cache invalidated: post={}", post_id)

    def clear(self) -> None:
        """Drop every cached count."""
        self.execute("DELETE FROM view_count_cache")
        logger.info("All cache cleared")
