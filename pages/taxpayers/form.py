"""Taxpayer form component, shared by the create form and the edit dialog."""
import dash_bootstrap_components as dbc
from dash import html

from components.common import required_label
from utils.constants import FIELD_LABELS, TAXPAYER_FIELDS

FIELD_IDS = {
    'tid': 'tid',
    'first_name': 'first-name',
    'last_name': 'last-name',
    'address': 'address',
}


def field_id(prefix: str, field: str) -> str:
    """Component id of a form input, e.g. ``create-first-name``."""
    return f"{prefix}-{FIELD_IDS[field]}"


def field_ids(prefix: str) -> list:
    """Component ids of all form inputs in form order."""
    return [field_id(prefix, field) for field in TAXPAYER_FIELDS]


def create_taxpayer_form(prefix: str, record: dict | None = None, lock_tid: bool = False):
    """Create the taxpayer input form.

    Args:
        prefix: Id prefix for the inputs ('create' or 'edit').
        record: Optional dict with existing taxpayer data for editing.
        lock_tid: Render the TID input read-only.

    Returns:
        dbc.Form component with all input fields.
    """
    record = record or {}

    rows = []
    for field in TAXPAYER_FIELDS:
        input_id = field_id(prefix, field)
        rows.append(html.Div([
            required_label(FIELD_LABELS[field], input_id),
            dbc.Input(
                type="text",
                id=input_id,
                value=record.get(field, ''),
                required=True,
                disabled=lock_tid and field == 'tid',
                invalid=False,
            ),
            dbc.FormFeedback(f"{FIELD_LABELS[field]} is required", type="invalid"),
        ], className="mb-3"))

    return dbc.Form(id=f"{prefix}-form", children=rows)
