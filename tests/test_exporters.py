"""Mini README: Tests for the CSV and printable report exports.

Structure:
    * CSV layout, number rendering, and the unescaped comma limitation.
    * report totals, row classes, escaping, and the print trigger.
"""

from __future__ import annotations

from datetime import timezone
from pathlib import Path

from expensetracker.export import CSV_HEADER, CsvExporter, ReportExporter


def test_csv_render_matches_layout(make_transaction) -> None:
    transactions = [
        make_transaction(1, -750.25, description="Rent", category="Bills"),
        make_transaction(2, 1000.0, description="Salary", date="2024-01-05T12:00:00.000Z"),
    ]

    content = CsvExporter(tz=timezone.utc).render(transactions)

    assert content.split("\n") == [
        ",".join(CSV_HEADER),
        "Rent,750.25,Bills,Expense,6/10/2024",
        "Salary,1000,General,Income,1/5/2024",
    ]


def test_csv_does_not_quote_commas(make_transaction) -> None:
    """Commas inside values are written as-is and shift the columns."""

    content = CsvExporter(tz=timezone.utc).render(
        [make_transaction(1, -3.0, description="Milk, eggs")]
    )

    assert content.split("\n")[1] == "Milk, eggs,3,General,Expense,6/10/2024"


def test_csv_export_writes_file(tmp_path: Path, make_transaction) -> None:
    destination = tmp_path / "out" / "transactions.csv"

    CsvExporter(tz=timezone.utc).export([make_transaction(1, 12.5)], destination)

    assert destination.read_text(encoding="utf-8").endswith("12.5,General,Income,6/10/2024")


def test_report_contains_totals_and_rows(make_transaction) -> None:
    transactions = [
        make_transaction(1, 2500.0, description="Salary"),
        make_transaction(2, -1234.5, description="Laptop", category="Shopping"),
    ]

    html = ReportExporter(currency_symbol="₦", tz=timezone.utc).render(transactions)

    assert "<title>Expense Report</title>" in html
    assert "<strong>Total Balance:</strong> ₦1,265.50" in html
    assert '<span class="income">₦2,500.00</span>' in html
    assert '<span class="expense">₦1,234.50</span>' in html
    assert '<td class="expense">₦1,234.50</td>' in html
    assert "<td>6/10/2024</td>" in html
    assert "window.print()" in html


def test_report_negative_balance_keeps_symbol_first(make_transaction) -> None:
    html = ReportExporter(tz=timezone.utc).render([make_transaction(1, -50.0)])

    assert "<strong>Total Balance:</strong> ₦-50.00" in html
    assert '<span class="expense">₦50.00</span>' in html


def test_report_escapes_descriptions_and_can_skip_printing(make_transaction) -> None:
    html = ReportExporter(tz=timezone.utc).render(
        [make_transaction(1, -1.0, description="<b>Gift</b>")], auto_print=False
    )

    assert "&lt;b&gt;Gift&lt;/b&gt;" in html
    assert "window.print()" not in html
