"""Tests for the view store."""

from datetime import datetime, timedelta

from app.models.stats import ViewRecord

T0 = datetime(2026, 1, 1, 12, 0, 0)


def make_record(post_id=10, user_id=0, ip="1.2.3.4", at=T0, views=1) -> ViewRecord:
    return ViewRecord(
        post_id=post_id,
        user_id=user_id,
        ip_address=ip,
        user_agent="",
        browser="Other",
        device="Desktop",
        views_count=views,
        created_at=at,
        updated_at=at,
    )


class TestInsert:
    def test_assigns_increasing_ids(self, view_repo):
        first = view_repo.insert(make_record())
        second = view_repo.insert(make_record())
        assert second > first

    def test_roundtrip_fields(self, view_repo):
        view_repo.insert(make_record(user_id=5, ip="9.9.9.9"))
        record = view_repo.get_latest(10, 5, "9.9.9.9")
        assert record.views_count == 1
        assert record.created_at == record.updated_at == T0


class TestGetLatest:
    def test_missing(self, view_repo):
        assert view_repo.get_latest(10, 0, "1.2.3.4") is None

    def test_most_recently_updated(self, view_repo):
        view_repo.insert(make_record(at=T0 + timedelta(hours=30)))
        view_repo.insert(make_record(at=T0))
        assert view_repo.get_latest(10, 0, "1.2.3.4").updated_at == T0 + timedelta(hours=30)

    def test_tie_broken_by_id(self, view_repo):
        view_repo.insert(make_record())
        newer = view_repo.insert(make_record())
        assert view_repo.get_latest(10, 0, "1.2.3.4").id == newer

    def test_requires_full_identity_match(self, view_repo):
        view_repo.insert(make_record(user_id=5))
        assert view_repo.get_latest(10, 7, "1.2.3.4") is None
        assert view_repo.get_latest(10, 5, "4.3.2.1") is None
        assert view_repo.get_latest(11, 5, "1.2.3.4") is None

    def test_null_user_matches_guest(self, container, view_repo):
        container.db.get().execute(
            """
            INSERT INTO post_view (post_id, user_id, ip_address, views_count, created_at, updated_at)
            VALUES (10, NULL, '1.2.3.4', 3, ?, ?)
            """,
            [T0, T0],
        )
        record = view_repo.get_latest(10, 0, "1.2.3.4")
        assert record.user_id == 0
        assert record.views_count == 3

    def test_null_user_does_not_match_member(self, container, view_repo):
        container.db.get().execute(
            """
            INSERT INTO post_view (post_id, user_id, ip_address, views_count, created_at, updated_at)
            VALUES (10, NULL, '1.2.3.4', 1, ?, ?)
            """,
            [T0, T0],
        )
        assert view_repo.get_latest(10, 5, "1.2.3.4") is None


class TestIncrement:
    def test_bumps_count_and_updated_at(self, view_repo):
        record_id = view_repo.insert(make_record())
        later = T0 + timedelta(minutes=5)
        view_repo.increment(record_id, later)

        record = view_repo.get_latest(10, 0, "1.2.3.4")
        assert record.views_count == 2
        assert record.created_at == T0
        assert record.updated_at == later


class TestAggregation:
    def test_sum_views(self, view_repo):
        view_repo.insert(make_record(views=3))
        view_repo.insert(make_record(ip="5.5.5.5", views=2))
        view_repo.insert(make_record(post_id=11, views=7))
        assert view_repo.sum_views(10) == 5

    def test_sum_views_empty(self, view_repo):
        assert view_repo.sum_views(10) == 0

    def test_list_for_post_oldest_first(self, view_repo):
        view_repo.insert(make_record(at=T0 + timedelta(days=2)))
        view_repo.insert(make_record(at=T0))
        history = view_repo.list_for_post(10)
        assert [r.created_at for r in history] == [T0, T0 + timedelta(days=2)]
