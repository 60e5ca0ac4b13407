"""
QuantLib-backed day count conventions.

Only ACT/365 Fixed is registered; the registry keeps name lookup uniform for
curves that take a convention by name.
"""

import logging
from datetime import date, datetime
from typing import Dict, Union

import QuantLib as ql

from yieldcurve.conventions.dates import to_ql_date
from yieldcurve.errors import InvalidInputError

logger = logging.getLogger(__name__)


class DayCountConvention:
    """Base class for QuantLib-backed day count conventions."""

    def __init__(self, name: str, ql_daycount: ql.DayCounter):
        self.name = name
        self._ql_daycount = ql_daycount

    def year_fraction(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> float:
        """Calculate year fraction between two dates using QuantLib."""
        return self._ql_daycount.yearFraction(to_ql_date(start), to_ql_date(end))

    def day_count(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> int:
        """Calculate number of days between two dates."""
        return self._ql_daycount.dayCount(to_ql_date(start), to_ql_date(end))

    def __str__(self) -> str:
        return self.name


class Actual365Fixed(DayCountConvention):
    """ACT/365F (ACT/365 Fixed) day count convention.

    yearfrac(d1, d2) = ActualDays(d1, d2) / 365
    """

    def __init__(self):
        super().__init__("ACT/365F", ql.Actual365Fixed())


ACT_365F = Actual365Fixed()

DAY_COUNT_CONVENTIONS: Dict[str, DayCountConvention] = {
    "ACT/365F": ACT_365F,
    "ACT/365": ACT_365F,
    "ACTUAL/365F": ACT_365F,
    "ACTUAL/365 FIXED": ACT_365F,
}


def get_day_count_convention(name: str) -> DayCountConvention:
    """Get a day count convention by name."""
    name_upper = name.upper().strip()
    try:
        return DAY_COUNT_CONVENTIONS[name_upper]
    except KeyError as exc:
        raise InvalidInputError(
            f"Unknown day count convention: {name}. "
            f"Available: {list(DAY_COUNT_CONVENTIONS.keys())}"
        ) from exc


def resolve_day_count(
    day_count: Union[str, DayCountConvention],
) -> DayCountConvention:
    """Accept either a registered name or a convention instance."""
    if isinstance(day_count, DayCountConvention):
        return day_count
    logger.debug("Resolving day count convention %r", day_count)
    return get_day_count_convention(day_count)
