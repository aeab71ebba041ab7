"""Mini README: Core package initializer for the Expense Tracker.

The tracker records income and expense transactions in a local key-value
store, derives balances and category breakdowns, and exports the data as CSV
or a printable report. This initializer only re-exports the logging helper so
importing the package stays cheap; the feature packages are imported where
they are used.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
