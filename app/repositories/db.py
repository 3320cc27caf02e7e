"""DuckDB connection management."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

import duckdb
from loguru import logger

from app.models import ALL_DDL, POST_VIEW_TABLE
from settings import DB_PATH, SCHEMA_VERSION


class Database:
    """Owns the root DuckDB connection and hands out one cursor per thread."""

    def __init__(self, path: str = DB_PATH):
        self.path = path
        self._root: duckdb.DuckDBPyConnection | None = None
        self._local = threading.local()
        self._lock = threading.Lock()

    def connect(self) -> "Database":
        with self._lock:
            if self._root is None:
                self._root = duckdb.connect(self.path)
                logger.debug("DB connected: {}", self.path)
        return self

    def get(self) -> duckdb.DuckDBPyConnection:
        """Get thread-local connection."""
        conn = getattr(self._local, "conn", None)
        if conn is None:
            with self._lock:
                if self._root is None:
                    raise duckdb.ConnectionException(f"Database not connected: {self.path}")
                conn = self._root.cursor()
            self._local.conn = conn
        return conn

    def close(self) -> None:
        """Close the root connection; thread cursors die with it."""
        with self._lock:
            if self._root is not None:
                self._root.close()
                self._root = None
                logger.debug("DB connection closed")
        self._local = threading.local()

    @property
    def connected(self) -> bool:
        return self._root is not None

    @contextmanager
    def transaction(self) -> Iterator[duckdb.DuckDBPyConnection]:
        """Run a block in a single transaction on this thread's connection."""
        conn = self.get()
        conn.execute("BEGIN TRANSACTION")
        try:
            yield conn
        except BaseException:
            conn.execute("ROLLBACK")
            raise
        conn.execute("COMMIT")

    def tables_exist(self) -> bool:
        """Check if the post view table exists."""
        try:
            result = self.get().execute(
                "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = ?",
                [POST_VIEW_TABLE],
            ).fetchone()
            return result[0] > 0
        except duckdb.Error:
            return False

    def init_tables(self) -> None:
        """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
        conn = self.get()
        for ddl in ALL_DDL:
            conn.execute(ddl)
        conn.execute(
            "INSERT OR REPLACE INTO stats_meta (key, value) VALUES ('schema_version', ?)",
            [SCHEMA_VERSION],
        )
        logger.info("DB tables initialized (schema {})", SCHEMA_VERSION)

    def schema_version(self) -> str | None:
        """Installed schema version, None if tables were never created."""
        try:
            row = self.get().execute("SELECT value FROM stats_meta WHERE key = 'schema_version'").fetchone()
        except duckdb.Error:
            return None
        return row[0] if row else None
