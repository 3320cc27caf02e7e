"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger

from app.errors import StoreUnavailable, WriteConflict
from app.repositories.db import Database


class BaseRepository:
    """Base repository with common functionality."""

    def __init__(self, db: Database):
        self._db = db
        logger.debug("{} initialized", self.__class__.__name__)

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query, mapping driver failures to StoreUnavailable."""
        try:
            conn = self._db.get()
            if params:
                return conn.execute(query, params)
            return conn.execute(query)
        except duckdb.TransactionException as e:
            raise WriteConflict(str(e)) from e
        except duckdb.Error as e:
            raise StoreUnavailable(str(e)) from e

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()
