"""Mini README: Persistence helpers for the Expense Tracker.

The tracker keeps its whole state as strings in a small key-value file that
behaves like browser local storage. ``LocalStorage`` is the only backend.
"""

from .local_storage import LocalStorage, StorageError

__all__ = ["LocalStorage", "StorageError"]
