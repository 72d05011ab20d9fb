"""Taxpayer store facade.

The UI talks only to the functions in this module. They dispatch to the
backend selected by ``STORE_BACKEND`` (``sqlite`` or ``supabase``) and
translate backend failures into ``StoreError``.
"""
import logging
import os
import sqlite3

import pandas as pd

from utils import database as db
from utils import supabase_client as sb
from utils.constants import FIELD_LABELS, TAXPAYER_FIELDS

logger = logging.getLogger(__name__)

BACKENDS = ('sqlite', 'supabase')


class StoreError(Exception):
    """Raised when a store operation fails."""
    pass


class DuplicateTaxPayerError(StoreError):
    """Raised when creating a taxpayer whose TID already exists."""
    pass


def get_store_backend() -> str:
    """Return the configured backend name.

    Raises:
        StoreError: If the backend is unknown or not configured
    """
    backend = os.environ.get('STORE_BACKEND', 'sqlite').strip().lower()
    if backend not in BACKENDS:
        raise StoreError(f"Unknown STORE_BACKEND: {backend}")
    if backend == 'supabase' and not sb.is_supabase_configured():
        raise StoreError("STORE_BACKEND=supabase requires SUPABASE_URL and SUPABASE_ANON_KEY")
    return backend


def _use_supabase() -> bool:
    return get_store_backend() == 'supabase'


def list_taxpayers() -> list:
    """Get all taxpayer records."""
    try:
        if _use_supabase():
            return sb.get_taxpayers()
        return db.get_taxpayers().to_dict('records')
    except StoreError:
        raise
    except Exception as e:
        raise StoreError(f"Failed to list taxpayers: {e}") from e


def create_taxpayer(tid: str, first_name: str, last_name: str, address: str):
    """Create a taxpayer record.

    Raises:
        DuplicateTaxPayerError: If ``tid`` already exists
        StoreError: If the backend call fails
    """
    record = {
        'tid': tid,
        'first_name': first_name,
        'last_name': last_name,
        'address': address,
    }
    try:
        if _use_supabase():
            sb.insert_taxpayer(record)
        else:
            db.save_taxpayer(record)
    except StoreError:
        raise
    except sqlite3.IntegrityError as e:
        raise DuplicateTaxPayerError(f"Taxpayer already exists: {tid}") from e
    except Exception as e:
        if sb.is_unique_violation(e):
            raise DuplicateTaxPayerError(f"Taxpayer already exists: {tid}") from e
        raise StoreError(f"Failed to create taxpayer {tid}: {e}") from e


def search_taxpayer(tid: str):
    """Find a taxpayer by TID.

    Returns:
        The record dict, or None if no taxpayer has this TID
    """
    try:
        if _use_supabase():
            return sb.get_taxpayer(tid)
        return db.get_taxpayer(tid)
    except StoreError:
        raise
    except Exception as e:
        raise StoreError(f"Failed to search taxpayer {tid}: {e}") from e


def update_taxpayer(tid: str, first_name: str, last_name: str, address: str) -> bool:
    """Update the mutable fields of a taxpayer.

    Returns:
        True on success, False if ``tid`` does not exist
    """
    record = {
        'first_name': first_name,
        'last_name': last_name,
        'address': address,
    }
    try:
        if _use_supabase():
            success = sb.update_taxpayer(tid, record)
        else:
            success = db.update_taxpayer(tid, record)
    except StoreError:
        raise
    except Exception as e:
        raise StoreError(f"Failed to update taxpayer {tid}: {e}") from e

    if not success:
        logger.warning(f"Update skipped, taxpayer not found: {tid}")
    return success


def export_taxpayers_csv() -> str:
    """Export all taxpayer records to CSV ('' when there are none)."""
    df = pd.DataFrame(list_taxpayers(), columns=list(TAXPAYER_FIELDS))

    if df.empty:
        return ''

    df = df.rename(columns=FIELD_LABELS)
    return df.to_csv(index=False)
