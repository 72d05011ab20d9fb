#!/usr/bin/env python3
"""
Copy taxpayer records from the local SQLite database to Supabase.

Usage:
1. Add SUPABASE_URL and SUPABASE_SERVICE_KEY to .env
2. python scripts/migrate_to_supabase.py

The service role key bypasses RLS, so it must be kept out of the app's
environment. Existing rows with the same TID are overwritten.
"""
import os
import sys
import sqlite3
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
from supabase import create_client

from utils.constants import SQLITE_DB_PATH, SUPABASE_TABLE

load_dotenv()

SUPABASE_URL = os.environ.get('SUPABASE_URL')
SUPABASE_SERVICE_ROLE_KEY = os.environ.get('SUPABASE_SERVICE_KEY')

# Rows per insert request
BATCH_SIZE = 500


def check_config():
    """Check required settings."""
    if not SUPABASE_URL:
        print("ERROR: SUPABASE_URL is not set")
        return False
    if not SUPABASE_SERVICE_ROLE_KEY:
        print("ERROR: SUPABASE_SERVICE_KEY is not set")
        print("Add the service_role key from Supabase Dashboard > Settings > API to .env")
        return False
    if not SQLITE_DB_PATH.exists():
        print(f"ERROR: SQLite database not found: {SQLITE_DB_PATH}")
        return False
    return True


def get_sqlite_connection():
    """Open the SQLite database."""
    return sqlite3.connect(SQLITE_DB_PATH)


def get_supabase_client():
    """Create a Supabase client with the service role key."""
    return create_client(SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY)


def read_taxpayers(sqlite_conn):
    """Read all taxpayer rows from SQLite."""
    cursor = sqlite_conn.cursor()
    cursor.execute("""
        SELECT tid, first_name, last_name, address
        FROM taxpayers
        ORDER BY tid
    """)
    return [
        {
            'tid': row[0],
            'first_name': row[1],
            'last_name': row[2],
            'address': row[3],
        }
        for row in cursor.fetchall()
    ]


def migrate_taxpayers(sqlite_conn, supabase):
    """Upsert every taxpayer into Supabase, keyed on TID."""
    print("\n=== Migrating taxpayers ===")

    taxpayers = read_taxpayers(sqlite_conn)
    if not taxpayers:
        print("No taxpayers to migrate")
        return 0

    migrated = 0
    for start in range(0, len(taxpayers), BATCH_SIZE):
        batch = taxpayers[start:start + BATCH_SIZE]
        print(f"Upserting {len(batch)} taxpayers...")
        response = supabase.table(SUPABASE_TABLE).upsert(batch, on_conflict='tid').execute()
        migrated += len(response.data)

    print(f"✓ Migrated {migrated} taxpayers")
    return migrated


def main():
    print("=" * 50)
    print("SQLite → Supabase taxpayer migration")
    print("=" * 50)
    print(f"SQLite database: {SQLITE_DB_PATH}")

    if not check_config():
        sys.exit(1)

    sqlite_conn = get_sqlite_connection()
    supabase = get_supabase_client()

    try:
        migrate_taxpayers(sqlite_conn, supabase)

        print("\n" + "=" * 50)
        print("✓ Migration complete")
        print("=" * 50)

    except Exception as e:
        print(f"\nERROR: migration failed: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
    finally:
        sqlite_conn.close()


if __name__ == '__main__':
    main()
