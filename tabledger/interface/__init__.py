"""Mini README: Interactive interfaces for Tab Ledger.

Exports the FastAPI application factory that serves the tab list and
ledger pages in the browser.
"""

from .web_app import create_application

__all__ = ["create_application"]
