"""Mini README: Tests for the amount and timestamp formatting helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from expensetracker.utils import (
    format_currency,
    format_local_date,
    format_plain_number,
    iso_timestamp,
    parse_timestamp,
)


def test_iso_timestamp_uses_millisecond_utc_form() -> None:
    moment = datetime(2024, 6, 15, 13, 5, 7, 891234, tzinfo=timezone(timedelta(hours=1)))

    assert iso_timestamp(moment) == "2024-06-15T12:05:07.891Z"
    assert parse_timestamp("2024-06-15T12:05:07.891Z") == datetime(
        2024, 6, 15, 12, 5, 7, 891000, tzinfo=timezone.utc
    )


def test_parse_timestamp_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_timestamp("yesterday")


def test_format_currency_groups_thousands() -> None:
    assert format_currency(1234567.891) == "₦1,234,567.89"
    assert format_currency(0.0) == "₦0.00"


def test_format_currency_keeps_symbol_before_minus_sign() -> None:
    assert format_currency(-42, symbol="$") == "$-42.00"
    assert format_currency(-1234.5) == "₦-1,234.50"
    assert format_currency(-0.001) == "₦0.00"


def test_format_plain_number_drops_trailing_zero() -> None:
    assert format_plain_number(50.0) == "50"
    assert format_plain_number(12.5) == "12.5"
    assert format_plain_number(0.1 + 0.2) == "0.30000000000000004"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1e21, "1e+21"),
        (1e20, "100000000000000000000"),
        (1e-7, "1e-7"),
        (1.5e-7, "1.5e-7"),
        (0.000001, "0.000001"),
        (-2.5, "-2.5"),
        (0.0, "0"),
    ],
)
def test_format_plain_number_matches_browser_exponent_rules(value: float, expected: str) -> None:
    assert format_plain_number(value) == expected


def test_format_local_date_converts_timezone() -> None:
    late_evening = "2024-06-15T23:30:00.000Z"

    assert format_local_date(late_evening, timezone.utc) == "6/15/2024"
    assert format_local_date(late_evening, timezone(timedelta(hours=2))) == "6/16/2024"
