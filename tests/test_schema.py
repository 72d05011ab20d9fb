# tests/test_schema.py

from utils import database as db
from utils.constants import BASE_DIR, TAXPAYER_FIELDS


def test_supabase_schema_declares_every_record_field() -> None:
    schema = (BASE_DIR / 'scripts' / 'schema.sql').read_text(encoding='utf-8')

    for field in TAXPAYER_FIELDS:
        assert f"{field} TEXT" in schema
    assert 'tid TEXT PRIMARY KEY' in schema


def test_sqlite_table_matches_record_fields() -> None:
    with db.get_connection() as conn:
        columns = [row['name'] for row in conn.execute('PRAGMA table_info(taxpayers)')]

    assert columns[:len(TAXPAYER_FIELDS)] == list(TAXPAYER_FIELDS)
    assert 'updated_at' in columns
