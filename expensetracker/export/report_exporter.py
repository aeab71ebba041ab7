"""Mini README: Printable HTML report of all transactions.

Structure:
    * ReportExporter - renders ``templates/report.html`` with Jinja2.

The report repeats the balance overview followed by a table of every
transaction. With ``auto_print`` enabled the page opens the browser's print
dialog as soon as it loads, which is how users save it as a PDF.
"""

from __future__ import annotations

from datetime import tzinfo
from pathlib import Path
from typing import Iterable, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..analytics import summarise_balance
from ..logging_utils import get_logger
from ..transactions import Transaction
from ..utils.formatting import format_currency, format_local_date

LOGGER = get_logger(__name__)

TEMPLATE_DIRECTORY = Path(__file__).parent / "templates"
REPORT_FILENAME = "expense_report.html"


class ReportExporter:
    """Render the transaction list and totals as a standalone HTML page."""

    def __init__(self, currency_symbol: str = "₦", tz: Optional[tzinfo] = None) -> None:
        self._currency_symbol = currency_symbol
        self._tz = tz
        self._environment = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIRECTORY)),
            autoescape=select_autoescape(["html"]),
        )

    def render(self, transactions: Iterable[Transaction], *, auto_print: bool = True) -> str:
        entries = list(transactions)
        summary = summarise_balance(entries)
        rows = [
            {
                "date": format_local_date(transaction.date, self._tz),
                "description": transaction.description,
                "category": transaction.category,
                "type": transaction.type_label,
                "css_class": "income" if transaction.amount > 0 else "expense",
                "amount": format_currency(abs(transaction.amount), self._currency_symbol),
            }
            for transaction in entries
        ]
        template = self._environment.get_template("report.html")
        return template.render(
            balance=format_currency(summary.balance, self._currency_symbol),
            income=format_currency(summary.income, self._currency_symbol),
            expenses=format_currency(abs(summary.expenses), self._currency_symbol),
            rows=rows,
            auto_print=auto_print,
        )

    def export(
        self,
        transactions: Iterable[Transaction],
        destination: Path,
        *,
        auto_print: bool = True,
    ) -> Path:
        """Write the rendered report to ``destination``."""

        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(self.render(transactions, auto_print=auto_print), encoding="utf-8")
        LOGGER.info("Exported HTML report to %s", destination)
        return destination
