"""Supabase client configuration and taxpayer table access."""
import logging
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from supabase import Client, create_client

from utils.constants import SUPABASE_TABLE, TAXPAYER_FIELDS

load_dotenv()

logger = logging.getLogger(__name__)

# Environment variables
SUPABASE_URL = os.environ.get('SUPABASE_URL', '')
SUPABASE_ANON_KEY = os.environ.get('SUPABASE_ANON_KEY', '')

# Postgres unique_violation
UNIQUE_VIOLATION = '23505'

# Rows per list request; must not exceed the PostgREST max-rows setting (1000 by default)
LIST_PAGE_SIZE = 1000


class SupabaseClientError(Exception):
    """Custom exception for Supabase client errors."""
    pass


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Get Supabase client instance (cached)."""
    if not SUPABASE_URL or not SUPABASE_ANON_KEY:
        raise SupabaseClientError(
            "SUPABASE_URL and SUPABASE_ANON_KEY must be set in environment variables"
        )

    return create_client(SUPABASE_URL, SUPABASE_ANON_KEY)


def is_supabase_configured() -> bool:
    """Check if Supabase is properly configured."""
    return bool(SUPABASE_URL and SUPABASE_ANON_KEY)


def is_unique_violation(error: Exception) -> bool:
    """Check whether a PostgREST error was caused by a duplicate key."""
    return getattr(error, 'code', None) == UNIQUE_VIOLATION


def _to_record(row: dict) -> dict:
    return {field: row.get(field, '') for field in TAXPAYER_FIELDS}


def get_taxpayers() -> list:
    """Get all taxpayer rows ordered by TID.

    PostgREST caps each response at its ``max-rows`` setting, so rows are
    fetched in pages of ``LIST_PAGE_SIZE`` until a short page comes back.
    """
    client = get_supabase_client()
    rows = []
    start = 0
    while True:
        response = (
            client.table(SUPABASE_TABLE)
            .select('*')
            .order('tid')
            .range(start, start + LIST_PAGE_SIZE - 1)
            .execute()
        )
        rows.extend(response.data)
        if len(response.data) < LIST_PAGE_SIZE:
            break
        start += LIST_PAGE_SIZE
    return [_to_record(row) for row in rows]


def insert_taxpayer(record: dict):
    """Insert a taxpayer row. Duplicate TIDs surface as a PostgREST error."""
    client = get_supabase_client()
    client.table(SUPABASE_TABLE).insert(_to_record(record)).execute()
    logger.info(f"Taxpayer inserted: {record['tid']}")


def get_taxpayer(tid: str) -> Optional[dict]:
    """Get a single taxpayer row by TID."""
    client = get_supabase_client()
    response = client.table(SUPABASE_TABLE).select('*').eq('tid', tid).limit(1).execute()
    if response.data:
        return _to_record(response.data[0])
    return None


def update_taxpayer(tid: str, record: dict) -> bool:
    """Update the mutable columns of a taxpayer row.

    Returns:
        True if a row was updated, False if no row has this TID
    """
    client = get_supabase_client()
    response = client.table(SUPABASE_TABLE).update({
        'first_name': record['first_name'],
        'last_name': record['last_name'],
        'address': record['address'],
    }).eq('tid', tid).execute()

    success = bool(response.data)
    if success:
        logger.info(f"Taxpayer updated: {tid}")
    return success
