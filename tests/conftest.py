# tests/conftest.py

import os
import tempfile
from contextvars import copy_context

import pytest

# Keep the import-time database out of the project tree
os.environ['TAXPAYER_DB_PATH'] = os.path.join(tempfile.mkdtemp(), 'taxpayers.db')
os.environ['STORE_BACKEND'] = 'sqlite'

from dash._callback_context import context_value  # noqa: E402
from dash._utils import AttributeDict  # noqa: E402

from utils import database as db  # noqa: E402
from utils import supabase_client as sb  # noqa: E402

from .fakes import FakeSupabase  # noqa: E402


@pytest.fixture(autouse=True)
def sqlite_store(tmp_path, monkeypatch):
    """Fresh SQLite database per test, selected as the active backend."""
    monkeypatch.setenv('STORE_BACKEND', 'sqlite')
    monkeypatch.setattr(db, 'DB_PATH', str(tmp_path / 'taxpayers.db'))
    db.init_db()
    return db


@pytest.fixture()
def supabase_store(monkeypatch) -> FakeSupabase:
    """Route the store to an in-memory Supabase fake."""
    fake = FakeSupabase()
    monkeypatch.setenv('STORE_BACKEND', 'supabase')
    monkeypatch.setattr(sb, 'SUPABASE_URL', 'https://example.supabase.co')
    monkeypatch.setattr(sb, 'SUPABASE_ANON_KEY', 'anon-key')
    monkeypatch.setattr(sb, 'get_supabase_client', lambda: fake)
    return fake


@pytest.fixture()
def trigger():
    """Call a callback as if ``prop_id`` (or a list of them, fired together) had fired it."""
    def run(prop_id, func, *args, value=1):
        prop_ids = [prop_id] if isinstance(prop_id, str) else prop_id

        def _run():
            context_value.set(AttributeDict(
                triggered_inputs=[{'prop_id': p, 'value': value} for p in prop_ids]
            ))
            return func(*args)
        return copy_context().run(_run)
    return run
