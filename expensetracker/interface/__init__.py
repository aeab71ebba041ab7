"""Mini README: Interactive interfaces for the Expense Tracker.

Exports the FastAPI application factory behind the browser control panel.
The Typer CLI in ``main_tracker.py`` reuses the toast texts from
``messages``.
"""

from .web_app import create_application

__all__ = ["create_application"]
