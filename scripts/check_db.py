#!/usr/bin/env python
"""Check database connectivity and that the link tables exist.

Usage:
    python scripts/check_db.py
"""

import asyncio
import sys

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine

from linkhub.core.config import get_settings

REQUIRED_TABLES = (
    "app_user",
    "auth_session",
    "shortlink",
    "link_list",
    "link_list_item",
    "click_event",
)


async def check_database() -> int:
    """Verify the connection and the migrated schema."""
    settings = get_settings()

    print("LinkHub - Database Connectivity Check")
    print("=" * 40)
    print(f"Database URL: {settings.database_url.rpartition('@')[2]}")  # Hide credentials
    print()

    engine = create_async_engine(settings.database_url)

    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            assert result.scalar() == 1
            print("[OK] Basic connectivity")

            tables = set(await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names()))
            missing = [name for name in REQUIRED_TABLES if name not in tables]
            if missing:
                print(f"[WARN] Missing tables: {', '.join(missing)}")
                print("       Run: alembic upgrade head")
            else:
                print("[OK] All link tables present")

        print()
        print("Database check completed.")
        return 0

    except SQLAlchemyError as e:
        print(f"[FAIL] Connection failed: {e}")
        print()
        print("Troubleshooting:")
        print("  1. Ensure PostgreSQL is running")
        print("  2. Check DATABASE_URL in .env file")
        return 1

    finally:
        await engine.dispose()


def main():
    sys.exit(asyncio.run(check_database()))


if __name__ == "__main__":
    main()
