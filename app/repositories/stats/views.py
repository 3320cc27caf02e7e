"""View repository - access to post view records."""

from datetime import datetime

from loguru import logger

from app.models.stats import ViewRecord
from app.repositories.base import BaseRepository

_COLUMNS = "id, post_id, user_id, ip_address, user_agent, browser, device, views_count, created_at, updated_at"


def _to_record(row) -> ViewRecord:
    return ViewRecord(
        id=row[0],
        post_id=row[1],
        user_id=row[2] or 0,
        ip_address=row[3],
        user_agent=row[4] or "",
        browser=row[5],
        device=row[6],
        views_count=row[7],
        created_at=row[8],
        updated_at=row[9],
    )


class ViewRepository(BaseRepository):
    """Repository for post view records."""

    def get_latest(self, post_id: int, user_id: int, ip_address: str) -> ViewRecord | None:
        """Most recently updated record for (post, identity); ties go to the higher id."""
        row = self.fetchone(
            f"""
            SELECT {_COLUMNS} FROM post_view
            WHERE post_id = ? AND ip_address = ? AND (user_id = ? OR (user_id IS NULL AND ? = 0))
            ORDER BY updated_at DESC, id DESC
            LIMIT 1
            """,
            [post_id, ip_address, user_id, user_id],
        )
        return _to_record(row) if row else None

    def increment(self, record_id: int, now: datetime) -> None:
        """Add one view to a record and refresh updated_at."""
        self.execute(
            "UPDATE post_view SET views_count = views_count + 1, updated_at = ? WHERE id = ?",
            [now, record_id],
        )
        logger.debug("Incremented view record {}", record_id)

    def insert(self, record: ViewRecord) -> int:
        """Insert a new record, returning its id."""
        row = self.fetchone(
            """
            INSERT INTO post_view
                (post_id, user_id, ip_address, user_agent, browser, device, views_count, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            RETURNING id
            """,
            [
                record.post_id,
                record.user_id,
                record.ip_address,
                record.user_agent,
                record.browser,
                record.device,
                record.views_count,
                record.created_at,
                record.updated_at,
            ],
        )
        record.id = row[0]
        logger.debug("Inserted view record {} for post {}", record.id, record.post_id)
        return record.id

    def sum_views(self, post_id: int) -> int:
        """Total views across all records of a post."""
        row = self.fetchone(
            "SELECT COALESCE(SUM(views_count), 0) FROM post_view WHERE post_id = ?",
            [post_id],
        )
        return int(row[0])

    def list_for_post(self, post_id: int) -> list[ViewRecord]:
        """All records of a post, oldest first."""
        rows = self.fetchall(
            f"SELECT {_COLUMNS} FROM post_view WHERE post_id = ? ORDER BY created_at, id",
            [post_id],
        )
        return [_to_record(r) for r in rows]

    def client_rows(self, post_id: int) -> list[tuple[str, str, int]]:
        """(browser, device, views_count) per record of a post."""
        rows = self.fetchall(
            "SELECT browser, device, views_count FROM post_view WHERE post_id = ?",
            [post_id],
        )
        logger.debug("client_rows({}): {} rows", post_id, len(rows))
        return [(r[0] or "Other", r[1] or "Desktop", int(r[2])) for r in rows]
