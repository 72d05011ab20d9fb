"""Callbacks for the taxpayers page."""
import logging
from datetime import datetime

from dash import callback_context, no_update
from dash.dependencies import Input, Output, State
from dash.exceptions import PreventUpdate

from app import app
from utils import store
from utils import validation as valid
from utils.constants import TAXPAYER_FIELDS

from .form import field_ids

logger = logging.getLogger(__name__)

CREATE_IDS = field_ids('create')
EDIT_IDS = field_ids('edit')

EMPTY_STATE_SHOWN = {'display': 'block'}
EMPTY_STATE_HIDDEN = {'display': 'none'}
NO_RECORDS_MESSAGE = "No taxpayer records yet"

REFRESH_PROP = 'store-taxpayers-refresh.data'
SEARCH_PROPS = {'btn-search.n_clicks', 'search-tid.n_submit'}


def not_found_message(tid: str) -> str:
    return f'No taxpayer found with TID "{tid}"'


def _toast(message: str, header: str = "Success"):
    return message, True, header


NO_TOAST = (no_update, no_update, no_update)


# =============================================================================
# Records Table Callbacks
# =============================================================================

@app.callback(
    [Output('taxpayers-table', 'data'),
     Output('taxpayers-empty-state', 'style'),
     Output('taxpayers-empty-message', 'children'),
     Output('taxpayers-table', 'selected_rows')],
    [Input('store-taxpayers-refresh', 'data'),
     Input('btn-search', 'n_clicks'),
     Input('search-tid', 'n_submit'),
     Input('search-tid', 'value')],
    running=[(Output('btn-search', 'disabled'), True, False)]
)
def refresh_taxpayers(_refresh, _search_clicks, _search_submit, search_value):
    """List all taxpayers, or show the single match for the search TID."""
    triggered = {t['prop_id'] for t in callback_context.triggered}
    tid = valid.clean_text(search_value)

    # A write always re-lists everything; the search box may hold unsubmitted text
    if REFRESH_PROP in triggered:
        tid = ''
    elif tid and not triggered & SEARCH_PROPS:
        # Typing in the search box only acts once it is submitted or cleared
        raise PreventUpdate

    try:
        if tid:
            taxpayer = store.search_taxpayer(tid)
            if taxpayer is None:
                return [], EMPTY_STATE_SHOWN, not_found_message(tid), []
            return [taxpayer], EMPTY_STATE_HIDDEN, '', []

        taxpayers = store.list_taxpayers()
    except store.StoreError:
        logger.exception("Fetching taxpayers failed")
        return no_update, no_update, no_update, no_update

    if not taxpayers:
        return [], EMPTY_STATE_SHOWN, NO_RECORDS_MESSAGE, []
    return taxpayers, EMPTY_STATE_HIDDEN, '', []


# =============================================================================
# Create Callbacks
# =============================================================================

@app.callback(
    [Output('store-taxpayers-refresh', 'data'),
     *[Output(input_id, 'value') for input_id in CREATE_IDS],
     *[Output(input_id, 'invalid') for input_id in CREATE_IDS],
     Output('toast-notification', 'children'),
     Output('toast-notification', 'is_open'),
     Output('toast-notification', 'header')],
    Input('btn-create', 'n_clicks'),
    [State(input_id, 'value') for input_id in CREATE_IDS],
    running=[(Output('btn-create', 'disabled'), True, False),
             (Output('btn-create', 'children'), "Adding...", "Add TaxPayer")],
    prevent_initial_call=True
)
def create_taxpayer(n_clicks, tid, first_name, last_name, address):
    """Validate the create form, store the taxpayer and clear the form."""
    if not n_clicks:
        raise PreventUpdate

    unchanged_values = [no_update] * len(CREATE_IDS)

    try:
        record = valid.validate_taxpayer(tid, first_name, last_name, address)
    except valid.ValidationError as e:
        return (no_update, *unchanged_values, *valid.missing_flags(e), *NO_TOAST)

    all_valid = [False] * len(CREATE_IDS)

    try:
        store.create_taxpayer(**record)
    except store.DuplicateTaxPayerError:
        logger.warning(f"Create rejected, TID already exists: {record['tid']}")
        return (no_update, *unchanged_values, *all_valid, *NO_TOAST)
    except store.StoreError:
        logger.exception("Creating taxpayer failed")
        return (no_update, *unchanged_values, *all_valid, *NO_TOAST)

    cleared = [''] * len(CREATE_IDS)
    return (datetime.now().isoformat(), *cleared, *all_valid,
            *_toast(f"TaxPayer {record['tid']} added"))


# =============================================================================
# Edit Modal Callbacks
# =============================================================================

@app.callback(
    [Output('edit-modal', 'is_open'),
     *[Output(input_id, 'value') for input_id in EDIT_IDS],
     *[Output(input_id, 'invalid') for input_id in EDIT_IDS]],
    [Input('btn-edit-selected', 'n_clicks'),
     Input('btn-cancel', 'n_clicks')],
    [State('taxpayers-table', 'selected_rows'),
     State('taxpayers-table', 'data')],
    prevent_initial_call=True
)
def toggle_edit_modal(edit_click, cancel_click, selected_rows, table_data):
    """Open the edit dialog pre-filled with the selected row, or close it."""
    ctx = callback_context
    if not ctx.triggered:
        raise PreventUpdate

    triggered = ctx.triggered[0]
    trigger_id = triggered['prop_id'].split('.')[0]

    # Ignore initial render (when n_clicks is None or 0)
    if not triggered['value']:
        raise PreventUpdate

    all_valid = [False] * len(EDIT_IDS)

    if trigger_id == 'btn-cancel':
        return (False, *[no_update] * len(EDIT_IDS), *all_valid)
    if trigger_id == 'btn-edit-selected' and selected_rows and table_data:
        row = table_data[selected_rows[0]]
        values = [row.get(field, '') for field in TAXPAYER_FIELDS]
        return (True, *values, *all_valid)
    raise PreventUpdate


@app.callback(
    [Output('store-taxpayers-refresh', 'data', allow_duplicate=True),
     Output('edit-modal', 'is_open', allow_duplicate=True),
     *[Output(input_id, 'invalid', allow_duplicate=True) for input_id in EDIT_IDS],
     Output('toast-notification', 'children', allow_duplicate=True),
     Output('toast-notification', 'is_open', allow_duplicate=True),
     Output('toast-notification', 'header', allow_duplicate=True)],
    Input('btn-save', 'n_clicks'),
    [State(input_id, 'value') for input_id in EDIT_IDS],
    running=[(Output('btn-save', 'disabled'), True, False)],
    prevent_initial_call=True
)
def save_taxpayer(n_clicks, tid, first_name, last_name, address):
    """Submit the edit dialog and close it on success."""
    if not n_clicks:
        raise PreventUpdate

    try:
        record = valid.validate_taxpayer(tid, first_name, last_name, address)
    except valid.ValidationError as e:
        return (no_update, no_update, *valid.missing_flags(e), *NO_TOAST)

    all_valid = [False] * len(EDIT_IDS)

    try:
        updated = store.update_taxpayer(**record)
    except store.StoreError:
        logger.exception("Updating taxpayer failed")
        return (no_update, no_update, *all_valid, *NO_TOAST)

    if not updated:
        return (no_update, no_update, *all_valid, *NO_TOAST)

    return (datetime.now().isoformat(), False, *all_valid,
            *_toast(f"TaxPayer {record['tid']} updated"))


# =============================================================================
# Export Callbacks
# =============================================================================

@app.callback(
    Output('download-csv', 'data'),
    Input('btn-download-csv', 'n_clicks'),
    running=[(Output('btn-download-csv', 'disabled'), True, False)],
    prevent_initial_call=True
)
def download_csv(n_clicks):
    """Download all taxpayer records as CSV."""
    if not n_clicks:
        raise PreventUpdate

    try:
        csv_content = store.export_taxpayers_csv()
    except store.StoreError:
        logger.exception("Exporting taxpayers failed")
        return no_update

    if not csv_content:
        logger.info("Nothing to export")
        return no_update
    return dict(content=csv_content, filename="taxpayers.csv")
