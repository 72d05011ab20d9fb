"""SQLite backend for taxpayer records."""
import sqlite3
import os
import logging
from contextlib import contextmanager
from typing import Optional
import pandas as pd

from utils.constants import SQLITE_DB_PATH, TAXPAYER_FIELDS

DB_PATH = str(SQLITE_DB_PATH)
logger = logging.getLogger(__name__)


@contextmanager
def get_connection():
    """Get a database connection with context manager."""
    os.makedirs(os.path.dirname(os.path.abspath(DB_PATH)), exist_ok=True)
    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()


def init_db():
    """Initialize the database with required tables."""
    with get_connection() as conn:
        cursor = conn.cursor()

        cursor.execute('''
            CREATE TABLE IF NOT EXISTS taxpayers (
                tid TEXT PRIMARY KEY,
                first_name TEXT NOT NULL,
                last_name TEXT NOT NULL,
                address TEXT NOT NULL,
                created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
                updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
            )
        ''')

        conn.commit()


def _to_record(row) -> dict:
    return {field: row[field] for field in TAXPAYER_FIELDS}


def get_taxpayers() -> pd.DataFrame:
    """Get all taxpayer records ordered by TID."""
    query = 'SELECT tid, first_name, last_name, address FROM taxpayers ORDER BY tid'

    with get_connection() as conn:
        df = pd.read_sql_query(query, conn)
    return df


def save_taxpayer(record: dict):
    """Insert a new taxpayer record.

    Raises:
        sqlite3.IntegrityError: If the TID already exists
    """
    with get_connection() as conn:
        cursor = conn.cursor()

        cursor.execute('''
            INSERT INTO taxpayers (tid, first_name, last_name, address)
            VALUES (?, ?, ?, ?)
        ''', (
            record['tid'],
            record['first_name'],
            record['last_name'],
            record['address'],
        ))

        conn.commit()
        logger.info(f"Taxpayer saved: {record['tid']}")


def get_taxpayer(tid: str) -> Optional[dict]:
    """Get a single taxpayer by TID."""
    with get_connection() as conn:
        cursor = conn.cursor()
        cursor.execute('SELECT * FROM taxpayers WHERE tid = ?', (tid,))
        row = cursor.fetchone()
        if row:
            return _to_record(row)
    return None


def update_taxpayer(tid: str, record: dict) -> bool:
    """Update the mutable fields of an existing taxpayer."""
    with get_connection() as conn:
        cursor = conn.cursor()

        cursor.execute('''
            UPDATE taxpayers SET
                first_name = ?, last_name = ?, address = ?,
                updated_at = CURRENT_TIMESTAMP
            WHERE tid = ?
        ''', (
            record['first_name'],
            record['last_name'],
            record['address'],
            tid
        ))

        success = cursor.rowcount > 0
        conn.commit()
        if success:
            logger.info(f"Taxpayer updated: {tid}")
    return success


init_db()
