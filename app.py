"""TaxPayer Management System - App initialization"""
import logging
import os

import dash
import dash_bootstrap_components as dbc
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logging.basicConfig(
    level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.BOOTSTRAP, dbc.icons.FONT_AWESOME],
    suppress_callback_exceptions=True,
    title='TaxPayer Management System',
    meta_tags=[
        {"charset": "utf-8"},
        {"name": "viewport", "content": "width=device-width, initial-scale=1"}
    ]
)

# Flask server reference (for deployment)
server = app.server

# Rows per page in the records table
PAGE_SIZE = int(os.environ.get('PAGE_SIZE', '10'))

# Development server settings
HOST = os.environ.get('HOST', '127.0.0.1')
PORT = int(os.environ.get('PORT', '8050'))
DEBUG = os.environ.get('DEBUG', 'false').lower() == 'true'
