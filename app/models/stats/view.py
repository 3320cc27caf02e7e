"""Post view model - one row per visitor cluster on a post."""

POST_VIEW_TABLE = "post_view"

POST_VIEW_SEQUENCE_DDL = "CREATE SEQUENCE IF NOT EXISTS post_view_id_seq START 1"

POST_VIEW_DDL = """
CREATE TABLE IF NOT EXISTS post_view (
    id BIGINT PRIMARY KEY DEFAULT nextval('post_view_id_seq'),
    post_id BIGINT NOT NULL,
    user_id BIGINT DEFAULT NULL,
    ip_address VARCHAR NOT NULL,
    user_agent VARCHAR DEFAULT NULL,
    browser VARCHAR DEFAULT NULL,
    device VARCHAR DEFAULT NULL,
    views_count INTEGER DEFAULT 1,
    created_at TIMESTAMP NOT NULL,
    updated_at TIMESTAMP NOT NULL
)
"""

POST_VIEW_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_post_view_post ON post_view(post_id)",
    "CREATE INDEX IF NOT EXISTS idx_post_view_identity ON post_view(user_id, ip_address, post_id)",
]
