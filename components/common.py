"""Common UI components shared across pages."""
import dash_bootstrap_components as dbc
from dash import html


def get_navbar():
    """Create navigation bar."""
    return dbc.Navbar(
        dbc.Container([
            dbc.NavbarBrand([
                html.I(className="fas fa-address-book me-2"),
                "TaxPayer Management System"
            ], href="/", className="fs-5"),
        ], fluid=True),
        color="white",
        className="mb-4"
    )


def required_label(text: str, html_for: str):
    """Form label with a red required marker."""
    return dbc.Label([text, html.Span("*", className="text-danger ms-1")], html_for=html_for)
