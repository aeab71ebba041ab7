"""Mini README: Filter and sort the transaction list for display.

Structure:
    * TypeFilter / DateRange / SortKey - the choices offered by the list view.
    * month_ago - roll a moment back one calendar month.
    * is_within_date_range - date window predicate.
    * filter_transactions / sort_transactions - the two derivation steps.
    * TransactionQuery - bundles the three choices and applies them.

Rolling back a month keeps the day of month; when that day does not exist in
the previous month the surplus days carry into the following month, so
31 March becomes 3 March (2 March in leap years). Both windows count
calendar days in the local timezone.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Iterable, List, Optional

from ..logging_utils import get_logger
from ..transactions import Transaction
from ..utils.formatting import parse_timestamp, utc_now

LOGGER = get_logger(__name__)


class _Choice(str, Enum):
    @classmethod
    def from_str(cls, value: str):
        """Coerce arbitrary casing into a valid member."""

        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported {cls.__name__} value: {value}") from error


class TypeFilter(_Choice):
    ALL = "all"
    INCOME = "income"
    EXPENSES = "expenses"


class DateRange(_Choice):
    ALL = "all"
    WEEK = "week"
    MONTH = "month"


class SortKey(_Choice):
    DATE = "date"
    AMOUNT = "amount"


def month_ago(moment: datetime) -> datetime:
    """Return ``moment`` one calendar month earlier, overflowing short months."""

    year, month = (moment.year, moment.month - 1) if moment.month > 1 else (moment.year - 1, 12)
    first_of_month = moment.replace(year=year, month=month, day=1)
    return first_of_month + timedelta(days=moment.day - 1)


def is_within_date_range(
    moment: datetime, date_range: DateRange, now: Optional[datetime] = None
) -> bool:
    """Check ``moment`` against the chosen window ending at ``now``."""

    if date_range is DateRange.ALL:
        return True
    # Shift local wall-clock time, then resolve the result against the local
    # zone again so a DST change inside the window does not move the cutoff.
    wall_clock = (now or utc_now()).astimezone().replace(tzinfo=None)
    if date_range is DateRange.WEEK:
        return moment >= (wall_clock - timedelta(days=7)).astimezone()
    if date_range is DateRange.MONTH:
        return moment >= month_ago(wall_clock).astimezone()
    return True


def _matches_type(transaction: Transaction, type_filter: TypeFilter) -> bool:
    if type_filter is TypeFilter.INCOME:
        return transaction.amount > 0
    if type_filter is TypeFilter.EXPENSES:
        return transaction.amount < 0
    return True


def filter_transactions(
    transactions: Iterable[Transaction],
    type_filter: TypeFilter = TypeFilter.ALL,
    date_range: DateRange = DateRange.ALL,
    *,
    now: Optional[datetime] = None,
) -> List[Transaction]:
    """Keep transactions matching both the type filter and the date window."""

    return [
        transaction
        for transaction in transactions
        if _matches_type(transaction, type_filter)
        and is_within_date_range(parse_timestamp(transaction.date), date_range, now)
    ]


def sort_transactions(
    transactions: Iterable[Transaction], sort_by: SortKey = SortKey.DATE
) -> List[Transaction]:
    """Sort newest first, or by absolute amount largest first."""

    if sort_by is SortKey.AMOUNT:
        return sorted(transactions, key=lambda transaction: abs(transaction.amount), reverse=True)
    return sorted(
        transactions,
        key=lambda transaction: parse_timestamp(transaction.date),
        reverse=True,
    )


@dataclass(frozen=True, slots=True)
class TransactionQuery:
    """The list view's current filter and sort selection."""

    type_filter: TypeFilter = TypeFilter.ALL
    date_range: DateRange = DateRange.ALL
    sort_by: SortKey = SortKey.DATE

    @classmethod
    def from_strings(
        cls, type_filter: str = "all", date_range: str = "all", sort_by: str = "date"
    ) -> "TransactionQuery":
        return cls(
            type_filter=TypeFilter.from_str(type_filter),
            date_range=DateRange.from_str(date_range),
            sort_by=SortKey.from_str(sort_by),
        )

    def apply(
        self, transactions: Iterable[Transaction], *, now: Optional[datetime] = None
    ) -> List[Transaction]:
        """Filter then sort ``transactions``."""

        visible = filter_transactions(transactions, self.type_filter, self.date_range, now=now)
        LOGGER.debug(
            "Query type=%s range=%s sort=%s kept %s transactions",
            self.type_filter.value,
            self.date_range.value,
            self.sort_by.value,
            len(visible),
        )
        return sort_transactions(visible, self.sort_by)
