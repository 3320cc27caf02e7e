"""Key/value metadata table (schema version)."""

META_DDL = """
CREATE TABLE IF NOT EXISTS stats_meta (
    key VARCHAR PRIMARY KEY,
    value VARCHAR NOT NULL
)
"""
