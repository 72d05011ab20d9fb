"""Common UI components."""
from components.common import get_navbar, required_label

__all__ = [
    'get_navbar',
    'required_label',
]
