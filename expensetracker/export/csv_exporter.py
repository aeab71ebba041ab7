"""Mini README: CSV export of the full transaction list.

Structure:
    * CSV_HEADER - the fixed header row.
    * CSV_FILENAME - download name offered to the browser.
    * CsvExporter - builds the CSV text and writes it to disk.

Fields are joined with plain commas and no quoting. A description or
category that itself contains a comma therefore shifts the columns of its
row; the format is meant for quick spreadsheet imports, not round-trips.
"""

from __future__ import annotations

from datetime import tzinfo
from pathlib import Path
from typing import Iterable, List, Optional

from ..logging_utils import get_logger
from ..transactions import Transaction
from ..utils.formatting import format_local_date, format_plain_number

LOGGER = get_logger(__name__)

CSV_HEADER = ["Description", "Amount", "Category", "Type", "Date"]
CSV_FILENAME = "transactions.csv"


class CsvExporter:
    """Serialise transactions into the tracker's CSV layout."""

    def __init__(self, tz: Optional[tzinfo] = None) -> None:
        self._tz = tz

    def rows(self, transactions: Iterable[Transaction]) -> List[List[str]]:
        """Return the header followed by one row per transaction."""

        rows = [list(CSV_HEADER)]
        for transaction in transactions:
            rows.append(
                [
                    transaction.description,
                    format_plain_number(abs(transaction.amount)),
                    transaction.category,
                    transaction.type_label,
                    format_local_date(transaction.date, self._tz),
                ]
            )
        return rows

    def render(self, transactions: Iterable[Transaction]) -> str:
        return "\n".join(",".join(row) for row in self.rows(transactions))

    def export(self, transactions: Iterable[Transaction], destination: Path) -> Path:
        """Write the CSV text to ``destination``."""

        content = self.render(transactions)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(content, encoding="utf-8")
        LOGGER.info("Exported %s CSV lines to %s", content.count("\n"), destination)
        return destination
