"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("STATS_DB_PATH", "stats.duckdb")
SCHEMA_VERSION = "1.0.0"

# Logging
LOG_DIR = Path("logs")

# Tracking
TRACKING_INTERVAL = int(os.getenv("STATS_TRACKING_INTERVAL", str(24 * 60 * 60)))
CACHE_TTL = 60 * 60
# Attempts per view when concurrent increments collide on the same record
WRITE_ATTEMPTS = 5
