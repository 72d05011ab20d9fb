"""Layout components for the taxpayers page."""
import dash_bootstrap_components as dbc
from dash import dash_table, dcc, html

from app import PAGE_SIZE
from utils.constants import FIELD_LABELS, TAXPAYER_FIELDS

from .form import create_taxpayer_form


def layout():
    """Create the taxpayers page: create form on the left, records on the right."""
    return dbc.Container([
        html.H4("TaxPayer Management System", className="mb-4"),

        dbc.Row([
            dbc.Col([
                dbc.Card([
                    dbc.CardHeader([
                        html.I(className="fas fa-user-plus me-2"),
                        "Add New TaxPayer"
                    ]),
                    dbc.CardBody([
                        create_taxpayer_form("create"),
                        dbc.Button("Add TaxPayer", id="btn-create", color="primary"),
                    ]),
                ]),
            ], md=4, className="mb-4"),

            dbc.Col([
                dbc.Card([
                    dbc.CardHeader([
                        html.I(className="fas fa-table me-2"),
                        "TaxPayer Records"
                    ]),
                    dbc.CardBody([
                        dbc.InputGroup([
                            dbc.Input(
                                id="search-tid",
                                type="search",
                                placeholder="Search by TID",
                            ),
                            dbc.Button([
                                html.I(className="fas fa-search me-1"),
                                "Search"
                            ], id="btn-search", color="primary"),
                        ], className="mb-3"),

                        dbc.ButtonGroup([
                            dbc.Button([
                                html.I(className="fas fa-edit me-1"),
                                "Edit"
                            ], id="btn-edit-selected", color="primary", outline=True, size="sm"),
                            dbc.Button([
                                html.I(className="fas fa-file-csv me-1"),
                                "CSV"
                            ], id="btn-download-csv", color="secondary", outline=True, size="sm"),
                        ], className="mb-3"),

                        # Empty state message (shown when there is nothing to list)
                        html.Div(
                            id="taxpayers-empty-state",
                            children=[
                                html.I(className="fas fa-inbox fa-3x text-muted mb-3"),
                                html.P(id="taxpayers-empty-message", className="text-muted"),
                            ],
                            className="text-center py-5",
                            style={'display': 'none'}
                        ),

                        dcc.Loading(
                            id="taxpayers-loading",
                            type="circle",
                            children=dash_table.DataTable(
                                id='taxpayers-table',
                                columns=[
                                    {'name': FIELD_LABELS[field], 'id': field}
                                    for field in TAXPAYER_FIELDS
                                ],
                                data=[],
                                row_selectable='single',
                                selected_rows=[],
                                sort_action='native',
                                page_action='native',
                                page_size=PAGE_SIZE,
                                style_table={'overflowX': 'auto'},
                                style_cell={
                                    'textAlign': 'left',
                                    'padding': '12px',
                                    'fontSize': '14px'
                                },
                                style_header={
                                    'backgroundColor': '#f1f5f9',
                                    'fontWeight': '600',
                                    'color': '#64748b'
                                },
                                style_as_list_view=True,
                            ),
                        ),
                    ]),
                ]),
            ], md=8),
        ]),

        dcc.Download(id="download-csv"),
    ], fluid=True)


def get_edit_modal():
    """Create the edit taxpayer modal."""
    return dbc.Modal([
        dbc.ModalHeader(dbc.ModalTitle("Edit TaxPayer")),
        dbc.ModalBody(create_taxpayer_form("edit", lock_tid=True)),
        dbc.ModalFooter([
            dbc.Button([
                html.I(className="fas fa-save me-2"),
                "Save"
            ], id="btn-save", color="primary", className="me-2"),
            dbc.Button([
                html.I(className="fas fa-times me-2"),
                "Cancel"
            ], id="btn-cancel", color="secondary", outline=True, n_clicks=0),
        ]),
    ], id="edit-modal", is_open=False, backdrop="static")
