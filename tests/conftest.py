"""Mini README: Shared fixtures for the Expense Tracker test-suite.

Structure:
    * make_transaction - build a valid record with a signed amount.
    * storage / store - a temporary local storage file and a store over it.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest

from expensetracker.storage import LocalStorage
from expensetracker.transactions import Transaction, TransactionStore, TransactionType

FIXED_NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


def build_transaction(
    transaction_id: int,
    amount: float,
    *,
    description: str = "Entry",
    category: str = "General",
    date: str = "2024-06-10T12:00:00.000Z",
) -> Transaction:
    return Transaction(
        id=transaction_id,
        description=description,
        amount=amount,
        category=category,
        date=date,
        type=TransactionType.INCOME if amount > 0 else TransactionType.EXPENSE,
    )


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    return build_transaction


@pytest.fixture
def storage(tmp_path: Path) -> LocalStorage:
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture
def store(storage: LocalStorage) -> TransactionStore:
    return TransactionStore(storage, clock=lambda: FIXED_NOW)
