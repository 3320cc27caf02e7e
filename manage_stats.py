#!/usr/bin/env python3
"""
Maintain the view stats database.

Usage:
    python manage_stats.py                  # Show database status
    python manage_stats.py --create         # Create missing tables
    python manage_stats.py --clear-cache    # Drop cached view counts
    python manage_stats.py 10 12            # Show views and breakdown for posts
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import Container
from settings.logging import setup_logging
from web.api.errors import ValidationError
from web.api.stats import create_database, get_client_breakdown, get_database_status, get_post_views

logger = setup_logging(level="INFO", to_file=True)


def print_status(container: Container) -> bool:
    """Print whether the stats table is installed."""
    status = get_database_status(container)

    print("\n" + "=" * 60)
    print("VIEW STATS DATABASE")
    print("=" * 60)
    print(f"  Path: {status.db_path}")
    if status.table_exists:
        print(f"  ✅ Table installed (schema {status.schema_version})")
    else:
        print("  ⚠️  The statistics table is missing. Run with --create.")
    print("=" * 60 + "\n")
    return status.table_exists


def print_posts(container: Container, post_ids: list[int]) -> None:
    """Print view counts and browser/device breakdown per post."""
    for post_id in post_ids:
        views = get_post_views(container, post_id)
        breakdown = get_client_breakdown(container, post_id)
        print(f"\nPost {post_id}: {views.views:,} views")
        for item in breakdown.items:
            print(f"  {item.browser:<18} {item.device:<8} {item.views:,}")


def main():
    args = sys.argv[1:]
    container = Container().init(create_tables=False)

    try:
        if "--create" in args:
            status = create_database(container)
            logger.info("Schema version: {}", status.schema_version)
            print_status(container)
            return

        if "--clear-cache" in args:
            container.stats.clear_cache()
            return

        post_ids = [int(a) for a in args if a.isdigit()]
        if args and not post_ids:
            print(__doc__)
            sys.exit(1)

        if not print_status(container):
            sys.exit(1)
        try:
            print_posts(container, post_ids)
        except ValidationError as e:
            logger.error("{}", e.message)
            sys.exit(1)
    finally:
        container.close()


if __name__ == "__main__":
    main()
