"""Stats service - view recording with deduplication and cached counts."""

from datetime import UTC, datetime, timedelta

import duckdb
import polars as pl
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.errors import StoreUnavailable, WriteConflict, validate_post_id
from app.models.stats import ViewRecord
from app.repositories.common import CacheRepository
from app.repositories.db import Database
from app.repositories.stats import ViewRepository
from app.services.stats.identity import normalize_user_id
from app.services.stats.user_agent import classify
from settings import CACHE_TTL, TRACKING_INTERVAL, WRITE_ATTEMPTS


def utcnow() -> datetime:
    """Current UTC time as a naive timestamp (DuckDB TIMESTAMP)."""
    return datetime.now(UTC).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Aware timestamps are converted to UTC; naive ones are taken as UTC already."""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


class StatsService:
    """Records post views and serves aggregated view counts.

    Repeat views from the same (post, user, ip) within ``tracking_interval``
    seconds increment the most recent record; anything older starts a new
    record. Counts are cached per post for ``CACHE_TTL`` seconds and are not
    invalidated by new views.
    """

    def __init__(
        self,
        db: Database,
        view_repo: ViewRepository,
        cache_repo: CacheRepository,
        tracking_interval: int = TRACKING_INTERVAL,
        cache_ttl: int = CACHE_TTL,
    ):
        self._db = db
        self._views = view_repo
        self._cache = cache_repo
        self.window = timedelta(seconds=tracking_interval)
        self.cache_ttl = cache_ttl
        logger.debug("StatsService initialized (window={}s)", tracking_interval)

    def record_view(
        self,
        post_id: int,
        user_id: int | None,
        ip_address: str,
        user_agent: str = "",
        now: datetime | None = None,
    ) -> None:
        """Count one view of a published post.

        Raises InvalidInput before touching the store, StoreUnavailable if the
        read-check-write could not be completed. Nothing is written on failure.
        """
        validate_post_id(post_id)
        user_id = normalize_user_id(user_id)
        now = to_naive_utc(now) if now else utcnow()
        self._write_view(post_id, user_id, ip_address, user_agent, now)

    @retry(
        stop=stop_after_attempt(WRITE_ATTEMPTS),
        wait=wait_exponential(multiplier=0.01, max=0.2),
        retry=retry_if_exception_type(WriteConflict),
        reraise=True,
    )
    def _write_view(self, post_id: int, user_id: int, ip_address: str, user_agent: str, now: datetime) -> None:
        """Read-check-write in one transaction, re-run when a concurrent increment wins."""
        try:
            with self._db.transaction():
                latest = self._views.get_latest(post_id, user_id, ip_address)
                if latest and now - latest.updated_at < self.window:
                    self._views.increment(latest.id, now)
                    return

                client = classify(user_agent)
                self._views.insert(
                    ViewRecord(
                        post_id=post_id,
                        user_id=user_id,
                        ip_address=ip_address,
                        user_agent=user_agent or "",
                        browser=client.browser.value,
                        device=client.device.value,
                        views_count=1,
                        created_at=now,
                        updated_at=now,
                    )
                )
        except duckdb.TransactionException as e:
            raise WriteConflict(str(e)) from e
        except duckdb.Error as e:
            raise StoreUnavailable(str(e)) from e

    def get_view_count(self, post_id: int, now: datetime | None = None) -> int:
        """Total views of a post, served from cache for up to cache_ttl seconds."""
        validate_post_id(post_id)
        now = to_naive_utc(now) if now else utcnow()

        cached = self._cached_count(post_id, now)
        if cached is not None:
            return cached

        try:
            views = self._views.sum_views(post_id)
        except StoreUnavailable as e:
            logger.debug("View store unavailable, counting 0 for post {}: {}", post_id, e)
            views = 0

        try:
            self._cache.set(post_id, views, now, self.cache_ttl)
        except StoreUnavailable:
            pass
        return views

    def _cached_count(self, post_id: int, now: datetime) -> int | None:
        try:
            return self._cache.get(post_id, now)
        except StoreUnavailable:
            return None

    def invalidate(self, post_id: int) -> None:
        """Forget the cached count of one post."""
        self._cache.invalidate(post_id)

    def clear_cache(self) -> None:
        self._cache.clear()

    def post_history(self, post_id: int) -> list[ViewRecord]:
        """Every record of a post, active and aged-out."""
        validate_post_id(post_id)
        return self._views.list_for_post(post_id)

    def client_breakdown(self, post_id: int) -> pl.DataFrame:
        """Views per (browser, device), most viewed first."""
        validate_post_id(post_id)
        rows = self._views.client_rows(post_id)
        df = pl.DataFrame(
            rows,
            schema={"browser": pl.Utf8, "device": pl.Utf8, "views": pl.Int64},
            orient="row",
        )
        return (
            df.group_by(["browser", "device"])
            .agg(pl.col("views").sum())
            .sort(["views", "browser", "device"], descending=[True, False, False])
        )
