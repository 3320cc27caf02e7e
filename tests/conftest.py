"""Shared fixtures: a fresh DuckDB file per test."""

import pytest

from app.container import Container


@pytest.fixture
def container(tmp_path):
    c = Container(db_path=str(tmp_path / "stats.duckdb"), tracking_interval=24 * 60 * 60).init()
    yield c
    c.close()


@pytest.fixture
def bare_container(tmp_path):
    """Container over a database whose tables were never created."""
    c = Container(db_path=str(tmp_path / "empty.duckdb")).init(create_tables=False)
    yield c
    c.close()


@pytest.fixture
def stats(container):
    return container.stats


@pytest.fixture
def view_repo(container):
    return container._view_repo
