"""View count cache table - per-post aggregated counts with expiry."""

CACHE_DDL = """
CREATE TABLE IF NOT EXISTS view_count_cache (
    post_id BIGINT PRIMARY KEY,
    views BIGINT NOT NULL,
    computed_at TIMESTAMP NOT NULL,
    expires_at TIMESTAMP NOT NULL
)
"""
