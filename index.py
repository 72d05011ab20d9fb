"""TaxPayer Management System - Main entry point."""
import dash_bootstrap_components as dbc
from dash import dcc, html, Input, Output

from app import app, server, HOST, PORT, DEBUG  # noqa: F401
from components.common import get_navbar

# Import all pages to register their callbacks
from pages import taxpayers

# Main layout
app.layout = html.Div([
    dcc.Location(id='url', refresh=False),

    # Bumped after every successful write to re-fetch the table
    dcc.Store(id='store-taxpayers-refresh', storage_type='memory'),

    get_navbar(),

    # Main content area
    html.Div(id='page-content', className="container-fluid"),

    # Edit modal (for taxpayers page)
    taxpayers.get_edit_modal(),

    # Toast notification
    dbc.Toast(
        id="toast-notification",
        header="Notice",
        is_open=False,
        dismissable=True,
        icon="success",
        duration=3000,
        style={"position": "fixed", "top": 66, "right": 10, "width": 350, "zIndex": 1050},
    ),
])


# Routing callback
@app.callback(
    Output('page-content', 'children'),
    Input('url', 'pathname')
)
def display_page(pathname):
    """Route to appropriate page based on URL."""
    if pathname in (None, '/', '/taxpayers'):
        return taxpayers.layout()

    return dbc.Container([
        dbc.Alert([
            html.I(className="fas fa-exclamation-triangle me-2"),
            f"Page not found: {pathname}"
        ], color="warning"),
        dcc.Link("Back to TaxPayer records", href="/"),
    ], fluid=True)


if __name__ == '__main__':
    app.run(host=HOST, port=PORT, debug=DEBUG)
