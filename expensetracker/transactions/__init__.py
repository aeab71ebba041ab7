"""Mini README: Transaction records and their store.

``models`` defines the immutable ``Transaction`` record and the form
validation that produces ``TransactionInput``; ``store`` keeps the ordered
list and persists it to local storage on every change.
"""

from .models import (
    INVALID_INPUT_MESSAGE,
    Transaction,
    TransactionInput,
    TransactionType,
    TransactionValidationError,
    parse_transaction_form,
)
from .store import LOAD_ERROR_MESSAGE, STORAGE_KEY, TransactionStore

__all__ = [
    "INVALID_INPUT_MESSAGE",
    "LOAD_ERROR_MESSAGE",
    "STORAGE_KEY",
    "Transaction",
    "TransactionInput",
    "TransactionStore",
    "TransactionType",
    "TransactionValidationError",
    "parse_transaction_form",
]
