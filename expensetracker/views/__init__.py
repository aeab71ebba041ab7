"""Mini README: Derived views over the transaction list.

Exposes the type, date-range, and sort choices used by the dashboard, the
JSON API, and the CLI ``list`` command.
"""

from .filters import (
    DateRange,
    SortKey,
    TransactionQuery,
    TypeFilter,
    filter_transactions,
    is_within_date_range,
    month_ago,
    sort_transactions,
)

__all__ = [
    "DateRange",
    "SortKey",
    "TransactionQuery",
    "TypeFilter",
    "filter_transactions",
    "is_within_date_range",
    "month_ago",
    "sort_transactions",
]
