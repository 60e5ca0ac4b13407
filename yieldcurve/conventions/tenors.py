"""Tenor string parsing ('3M', '2Y', '1W', '10D') into QuantLib periods."""

from typing import Tuple

import QuantLib as ql

from yieldcurve.errors import InvalidInputError

_UNITS = {
    "D": ql.Days,
    "W": ql.Weeks,
    "M": ql.Months,
    "Y": ql.Years,
}


def parse_tenor(tenor: str) -> Tuple[int, str]:
    """Split a tenor string into (length, unit letter)."""
    t = tenor.upper().strip()
    if len(t) < 2 or t[-1] not in _UNITS:
        raise InvalidInputError(f"Unsupported tenor: {tenor}")
    try:
        length = int(t[:-1])
    except ValueError as exc:
        raise InvalidInputError(f"Unsupported tenor: {tenor}") from exc
    if length < 0:
        raise InvalidInputError(f"Tenor length must be non-negative: {tenor}")
    return length, t[-1]


def tenor_to_period(tenor: str) -> ql.Period:
    """Convert tenor string to a QuantLib Period."""
    length, unit = parse_tenor(tenor)
    return ql.Period(length, _UNITS[unit])


def tenor_to_months(tenor: str) -> int:
    """Convert tenor string (e.g., '3M', '2Y') to number of months."""
    length, unit = parse_tenor(tenor)
    if unit == "M":
        return length
    if unit == "Y":
        return length * 12
    raise InvalidInputError(f"Tenor is not expressible in months: {tenor}")
