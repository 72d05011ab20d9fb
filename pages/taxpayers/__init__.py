"""Taxpayers page module.

This module provides the page for managing taxpayer records.
It is split into:
- layout.py: Page layout and the edit modal
- form.py: Taxpayer input form component
- callbacks.py: All Dash callbacks for the page
"""
from .layout import layout, get_edit_modal
from .form import create_taxpayer_form

# Import callbacks to register them with the app
from . import callbacks  # noqa: F401

__all__ = ['layout', 'get_edit_modal', 'create_taxpayer_form']
