"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.common import CacheRepository
from app.repositories.db import Database
from app.repositories.stats import ViewRepository

__all__ = [
    # DB
    "Database",
    # Base
    "BaseRepository",
    # Common
    "CacheRepository",
    # Stats
    "ViewRepository",
]
