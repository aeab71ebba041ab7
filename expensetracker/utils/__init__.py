"""Mini README: Utility helpers for the Expense Tracker.

Exports the formatting helpers used to render amounts and dates in the
dashboard, the CLI, and both export formats.
"""

from .formatting import (
    format_currency,
    format_local_date,
    format_plain_number,
    iso_timestamp,
    parse_timestamp,
    utc_now,
)

__all__ = [
    "format_currency",
    "format_local_date",
    "format_plain_number",
    "iso_timestamp",
    "parse_timestamp",
    "utc_now",
]
