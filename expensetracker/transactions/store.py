"""Mini README: Transaction store persisted to local storage.

Structure:
    * LOAD_ERROR_MESSAGE - toast shown when saved data cannot be restored.
    * TransactionStore - owns the ordered list and every mutation of it.

The store keeps transactions newest-first and writes the full list back to
local storage after each add, delete, or bulk replacement. Loading never
raises: unreadable data is logged, reported through ``load_error``, and the
store carries on with an empty list.
"""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, List, Optional

from ..logging_utils import get_logger
from ..storage import LocalStorage, StorageError
from ..utils.formatting import iso_timestamp, utc_now
from .models import Transaction, TransactionInput

LOGGER = get_logger(__name__)

STORAGE_KEY = "transactions"
LOAD_ERROR_MESSAGE = "Could not load saved transactions; starting with an empty list."
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class TransactionStore:
    """Manage the transaction list and keep local storage in sync."""

    def __init__(
        self,
        storage: LocalStorage,
        *,
        storage_key: str = STORAGE_KEY,
        clock: Callable[[], datetime] = utc_now,
        autoload: bool = True,
    ) -> None:
        self._storage = storage
        self._storage_key = storage_key
        self._clock = clock
        self._transactions: List[Transaction] = []
        self._last_id = 0
        self.load_error: Optional[str] = None
        if autoload:
            self.load()

    def load(self) -> List[Transaction]:
        """Replace the in-memory list with the stored one."""

        self.load_error = None
        try:
            raw = self._storage.get_item(self._storage_key)
            loaded = self._decode(raw) if raw else []
        except (
            StorageError,
            ValueError,
            TypeError,
            KeyError,
            OverflowError,
            RecursionError,
        ) as error:
            LOGGER.warning("Failed to load transactions from %s: %s", self._storage.path, error)
            self.load_error = LOAD_ERROR_MESSAGE
            loaded = []
        self._set(loaded)
        LOGGER.debug("Transaction store loaded with %s transactions", len(self._transactions))
        return self.transactions

    @staticmethod
    def _decode(raw: str) -> List[Transaction]:
        payload = json.loads(raw)
        if not isinstance(payload, list):
            raise ValueError("Stored transactions must be a JSON list")
        transactions = [Transaction.from_dict(entry) for entry in payload]
        identifiers = [transaction.id for transaction in transactions]
        if len(identifiers) != len(set(identifiers)):
            raise ValueError("Stored transactions contain duplicate ids")
        return transactions

    def _set(self, transactions: List[Transaction]) -> None:
        self._transactions = list(transactions)
        self._last_id = max((transaction.id for transaction in self._transactions), default=0)

    def persist(self) -> None:
        """Write the current list to local storage."""

        serialised = json.dumps(
            [transaction.as_dict() for transaction in self._transactions],
            ensure_ascii=False,
        )
        self._storage.set_item(self._storage_key, serialised)

    def replace_all(self, transactions: Iterable[Transaction]) -> None:
        """Bulk load ``transactions`` (kept in the given order) and persist them."""

        incoming = list(transactions)
        identifiers = [transaction.id for transaction in incoming]
        if len(identifiers) != len(set(identifiers)):
            raise ValueError("Transaction ids must be unique")
        self._set(incoming)
        self.persist()
        LOGGER.info("Replaced transaction list with %s entries", len(incoming))

    @property
    def transactions(self) -> List[Transaction]:
        """Return a copy of the stored list, newest first."""

        return list(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def _next_id(self, created_at: datetime) -> int:
        """Use the creation time in milliseconds, bumped past any issued id."""

        candidate = (created_at - EPOCH) // timedelta(milliseconds=1)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def add_transaction(self, entry: TransactionInput) -> Transaction:
        """Prepend a new record built from a validated submission."""

        created_at = self._clock()
        transaction = Transaction(
            id=self._next_id(created_at),
            description=entry.description,
            amount=entry.signed_amount,
            category=entry.category,
            date=iso_timestamp(created_at),
            type=entry.transaction_type,
        )
        self._transactions.insert(0, transaction)
        self.persist()
        LOGGER.info(
            "Added %s %s (%s) in %s",
            transaction.type.value,
            transaction.id,
            transaction.amount,
            transaction.category,
        )
        return transaction

    def get_transaction(self, transaction_id: int) -> Transaction:
        """Retrieve a transaction, raising informative errors when missing."""

        for transaction in self._transactions:
            if transaction.id == transaction_id:
                return transaction
        raise KeyError(f"Transaction {transaction_id} not found")

    def delete_transaction(self, transaction_id: int) -> Transaction:
        """Remove exactly the record with ``transaction_id``."""

        removed = self.get_transaction(transaction_id)
        self._transactions = [
            transaction for transaction in self._transactions if transaction.id != transaction_id
        ]
        self.persist()
        LOGGER.info("Deleted transaction %s", transaction_id)
        return removed
