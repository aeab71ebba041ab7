"""Mini README: Formatting and timestamp helpers shared by views and exports.

Structure:
    * utc_now / iso_timestamp / parse_timestamp - creation-time stamps.
    * format_currency - grouped, two-decimal amounts with a currency prefix.
    * format_plain_number - numbers rendered the way a browser prints them.
    * format_local_date - month/day/year in the local timezone.

Transaction dates are stored as UTC ISO-8601 strings with millisecond
precision and a ``Z`` suffix. These helpers keep that wire format in one
place and render it for humans.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone, tzinfo
from decimal import Decimal
from typing import Optional


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 string into an aware datetime (naive means UTC)."""

    if not isinstance(value, str):
        raise ValueError("Timestamps must be ISO-8601 strings")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as error:
        raise ValueError(f"Invalid ISO-8601 timestamp: {value!r}") from error
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_currency(amount: float, symbol: str = "₦") -> str:
    """Format ``amount`` with thousands separators and two decimals.

    The symbol always leads, so a negative balance reads ``₦-50.00``.
    """

    formatted = f"{abs(amount):,.2f}"
    sign = "-" if amount < 0 and formatted.strip("0.,") else ""
    return f"{symbol}{sign}{formatted}"


def format_plain_number(value: float) -> str:
    """Render a number the way a browser's ``Number#toString`` does.

    Uses the shortest round-tripping digits, plain notation for decimal
    exponents between -7 and 21, and ``1e-7`` / ``1e+21`` style otherwise.
    """

    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(number))).as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped
    count = len(digits)
    point = count + exponent

    if count <= point <= 21:
        body = digits + "0" * (point - count)
    elif 0 < point <= 21:
        body = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        body = "0." + "0" * -point + digits
    else:
        power = point - 1
        mantissa = digits[0] + (f".{digits[1:]}" if count > 1 else "")
        body = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return sign + body


def format_local_date(value: str, tz: Optional[tzinfo] = None) -> str:
    """Render an ISO timestamp as ``M/D/YYYY`` in ``tz`` (local time by default)."""

    moment = parse_timestamp(value).astimezone(tz)
    return f"{moment.month}/{moment.day}/{moment.year}"
