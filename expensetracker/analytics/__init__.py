"""Mini README: Aggregations derived from the transaction list.

Provides the balance overview totals and the per-category expense breakdown
used by the dashboard chart and the printable report.
"""

from .aggregates import (
    CHART_COLOURS,
    BalanceSummary,
    CategoryChart,
    build_category_chart,
    expenses_by_category,
    summarise_balance,
)

__all__ = [
    "CHART_COLOURS",
    "BalanceSummary",
    "CategoryChart",
    "build_category_chart",
    "expenses_by_category",
    "summarise_balance",
]
