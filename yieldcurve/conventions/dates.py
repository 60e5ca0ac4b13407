from datetime import date, datetime
from typing import Union

import QuantLib as ql
from pandas import Timestamp

from yieldcurve.errors import InvalidInputError

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Normalize a string, Timestamp, datetime or date to a plain date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    # Timestamp and datetime are both date subclasses, so test them first
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        raise InvalidInputError(f"Unsupported date string format: {date_like!r}")
    raise InvalidInputError(f"Unsupported type for date: {type(date_like)}")


def to_ql_date(date_like: DateLike) -> ql.Date:
    """Convert a date-like value to a QuantLib Date."""
    py_date = to_date(date_like)
    return ql.Date(py_date.day, py_date.month, py_date.year)


def to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


def format_long_date(date_like: DateLike) -> str:
    """
    Format a date the way QuantLib prints it, e.g. 'August 24th, 2025'.
    """
    return str(to_ql_date(date_like))
