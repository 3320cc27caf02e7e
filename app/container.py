"""Dependency container - built once at process start and passed to handlers."""

from loguru import logger

from app.repositories.common import CacheRepository
from app.repositories.db import Database
from app.repositories.stats import ViewRepository
from app.services.stats import StatsService
from settings import CACHE_TTL, DB_PATH, TRACKING_INTERVAL


class Container:
    """Application container - owns the database and the stats service."""

    def __init__(self, db_path: str = DB_PATH, tracking_interval: int = TRACKING_INTERVAL):
        self.db_path = db_path
        self.tracking_interval = tracking_interval
        self._initialized = False

    def init(self, create_tables: bool = True) -> "Container":
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return self

        self.db = Database(self.db_path).connect()
        if create_tables and not self.db.tables_exist():
            self.db.init_tables()

        # Repositories
        self._view_repo = ViewRepository(self.db)
        self._cache_repo = CacheRepository(self.db)

        # Services (with injected repos)
        self.stats = StatsService(
            db=self.db,
            view_repo=self._view_repo,
            cache_repo=self._cache_repo,
            tracking_interval=self.tracking_interval,
            cache_ttl=CACHE_TTL,
        )

        self._initialized = True
        logger.info("Container initialized: {}", self.db_path)
        return self

    def close(self) -> None:
        if not self._initialized:
            return
        self.db.close()
        self._initialized = False

    def __enter__(self) -> "Container":
        return self.init()

    def __exit__(self, *_) -> None:
        self.close()
