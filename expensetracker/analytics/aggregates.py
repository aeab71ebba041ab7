"""Mini README: Derived totals for the balance overview and expense chart.

Structure:
    * BalanceSummary - income, expenses, and net balance for a list.
    * summarise_balance - reduce a transaction list into a ``BalanceSummary``.
    * expenses_by_category - absolute expense totals grouped by category.
    * CategoryChart / build_category_chart - pie chart payload with colours.

Expenses are reported as the signed (negative) sum so that
``balance == income + expenses`` always holds; views show the absolute value.
Category order follows the first appearance of each category in the list.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import cycle
from typing import Dict, Iterable, List, Optional

from ..logging_utils import get_logger
from ..transactions import Transaction

LOGGER = get_logger(__name__)

CHART_COLOURS = [
    "#3B82F6",
    "#8B5CF6",
    "#EC4899",
    "#10B981",
    "#F59E0B",
    "#EF4444",
    "#06B6D4",
    "#84CC16",
]


@dataclass(frozen=True, slots=True)
class BalanceSummary:
    """Totals shown in the balance overview."""

    income: float
    expenses: float
    balance: float

    def as_dict(self) -> Dict[str, float]:
        return {"income": self.income, "expenses": self.expenses, "balance": self.balance}


def summarise_balance(transactions: Iterable[Transaction]) -> BalanceSummary:
    """Sum positive and negative amounts and derive the balance."""

    income = 0.0
    expenses = 0.0
    for transaction in transactions:
        if transaction.amount > 0:
            income += transaction.amount
        elif transaction.amount < 0:
            expenses += transaction.amount
    return BalanceSummary(income=income, expenses=expenses, balance=income + expenses)


def expenses_by_category(transactions: Iterable[Transaction]) -> Dict[str, float]:
    """Return ``{category: abs(total)}`` for expense records only."""

    totals: Dict[str, float] = {}
    for transaction in transactions:
        if transaction.amount < 0:
            totals[transaction.category] = totals.get(transaction.category, 0.0) + abs(
                transaction.amount
            )
    return totals


@dataclass(frozen=True, slots=True)
class CategoryChart:
    """Labels, values, and colours for the expenses-by-category chart."""

    labels: List[str]
    values: List[float]
    colours: List[str]

    def as_dict(self) -> Dict[str, List]:
        return {"labels": list(self.labels), "values": list(self.values), "colours": list(self.colours)}

    def segments(self) -> List[Dict[str, object]]:
        """Per-category rows with their share of total expenses."""

        total = sum(self.values)
        return [
            {
                "label": label,
                "value": value,
                "colour": colour,
                "share": (value / total) if total else 0.0,
            }
            for label, value, colour in zip(self.labels, self.values, self.colours)
        ]


def build_category_chart(transactions: Iterable[Transaction]) -> Optional[CategoryChart]:
    """Build chart data, or ``None`` when there are no expenses to plot."""

    totals = expenses_by_category(transactions)
    if not totals:
        return None
    colours = [colour for colour, _ in zip(cycle(CHART_COLOURS), totals)]
    LOGGER.debug("Built category chart with %s segments", len(totals))
    return CategoryChart(labels=list(totals.keys()), values=list(totals.values()), colours=colours)
