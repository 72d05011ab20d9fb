"""Page modules for the taxpayer application."""
from pages import taxpayers

__all__ = ['taxpayers']
