"""Application-wide constants and paths."""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Project root directory
BASE_DIR = Path(__file__).parent.parent

DATA_DIR = BASE_DIR / 'data'

# SQLite database path (local backend)
SQLITE_DB_PATH = Path(os.environ.get('TAXPAYER_DB_PATH', DATA_DIR / 'taxpayers.db'))

# Supabase table holding taxpayer records
SUPABASE_TABLE = 'taxpayers'

# Record fields in display order, with their table headers
TAXPAYER_FIELDS = ('tid', 'first_name', 'last_name', 'address')
FIELD_LABELS = {
    'tid': 'TID',
    'first_name': 'First Name',
    'last_name': 'Last Name',
    'address': 'Address',
}
