"""Mini README: Toast texts shared by the web control panel and the CLI."""

from __future__ import annotations

from ..transactions import TransactionType

DELETED_MESSAGE = "Transaction deleted"
CSV_EXPORTED_MESSAGE = "CSV exported successfully!"
REPORT_EXPORTED_MESSAGE = "PDF export initiated!"
CONFIRMATION_REQUIRED_MESSAGE = "Please confirm the deletion before removing a transaction"


def added_message(transaction_type: TransactionType) -> str:
    return f"{transaction_type.label} added successfully!"
