"""Mini README: Transaction records and form validation.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * Transaction - immutable record with JSON helpers and the sign invariant.
    * TransactionInput - validated payload produced from a user submission.
    * parse_transaction_form - turn raw form values into ``TransactionInput``.
    * TransactionValidationError - rejection carrying the user-facing message.

Amounts are stored signed: expenses are negative and income positive. The
type is kept alongside the amount and the two must always agree, so a record
that contradicts itself cannot be constructed or loaded.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from ..utils.formatting import parse_timestamp

INVALID_INPUT_MESSAGE = "Please enter valid description and amount"


class TransactionValidationError(ValueError):
    """Raised when a submission is rejected; ``str(error)`` is shown to the user."""

    def __init__(self, message: str = INVALID_INPUT_MESSAGE) -> None:
        super().__init__(message)


class TransactionType(str, Enum):
    """Enumerate the supported transaction categories."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def signed(self, amount: float) -> float:
        """Apply this type's sign to a positive magnitude."""

        return -abs(amount) if self is TransactionType.EXPENSE else abs(amount)


@dataclass(frozen=True, slots=True)
class Transaction:
    """One recorded income or expense event."""

    id: int
    description: str
    amount: float
    category: str
    date: str
    type: TransactionType

    def __post_init__(self) -> None:
        if self.type is TransactionType.EXPENSE and not self.amount < 0:
            raise ValueError(f"Expense {self.id} must have a negative amount, got {self.amount}")
        if self.type is TransactionType.INCOME and not self.amount > 0:
            raise ValueError(f"Income {self.id} must have a positive amount, got {self.amount}")

    @property
    def is_income(self) -> bool:
        return self.amount > 0

    @property
    def is_expense(self) -> bool:
        return self.amount < 0

    @property
    def type_label(self) -> str:
        """Label derived from the amount sign, as shown in exports."""

        return "Income" if self.amount > 0 else "Expense"

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "id": self.id,
            "description": self.description,
            "amount": self.amount,
            "category": self.category,
            "date": self.date,
            "type": self.type.value,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Transaction":
        """Rebuild a transaction from its stored JSON form."""

        if not isinstance(payload, dict):
            raise TypeError("Stored transactions must be JSON objects")
        identifier = payload["id"]
        if isinstance(identifier, bool) or not isinstance(identifier, int):
            raise ValueError(f"Transaction id must be an integer, got {identifier!r}")
        amount = payload["amount"]
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise ValueError(f"Transaction amount must be numeric, got {amount!r}")
        date = str(payload["date"])
        parse_timestamp(date)
        return cls(
            id=identifier,
            description=str(payload["description"]),
            amount=float(amount),
            category=str(payload["category"]),
            date=date,
            type=TransactionType.from_str(str(payload["type"])),
        )


@dataclass(frozen=True, slots=True)
class TransactionInput:
    """A validated submission; ``amount`` is always a positive magnitude."""

    description: str
    amount: float
    category: str
    transaction_type: TransactionType

    @property
    def signed_amount(self) -> float:
        return self.transaction_type.signed(self.amount)


def parse_transaction_form(
    description: Optional[str],
    amount: Union[str, float, int, None],
    category: Optional[str] = None,
    transaction_type: Union[str, TransactionType] = TransactionType.EXPENSE,
    *,
    default_category: str = "General",
) -> TransactionInput:
    """Validate raw form values, raising ``TransactionValidationError`` on bad input."""

    if description is None or not str(description).strip():
        raise TransactionValidationError()
    try:
        magnitude = float(amount)  # type: ignore[arg-type]
    except (TypeError, ValueError) as error:
        raise TransactionValidationError() from error
    if not math.isfinite(magnitude) or magnitude <= 0:
        raise TransactionValidationError()

    if isinstance(transaction_type, TransactionType):
        kind = transaction_type
    else:
        try:
            kind = TransactionType.from_str(transaction_type)
        except ValueError as error:
            raise TransactionValidationError(str(error)) from error

    chosen_category = (category or "").strip() or default_category
    return TransactionInput(
        description=str(description).strip(),
        amount=magnitude,
        category=chosen_category,
        transaction_type=kind,
    )
