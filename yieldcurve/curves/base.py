"""
Base curve class shared by zero curves.
"""

import math
import numbers
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Optional, Union

from yieldcurve.conventions.daycount import DayCountConvention
from yieldcurve.errors import InvalidInputError

from .compounding import Compounding, zero_rate_to_discount_factor

TimeLike = Union[datetime, date, float]


class BaseCurve(ABC):
    """Base implementation for yield curves."""

    def __init__(
        self,
        reference_date: Optional[date] = None,
        day_count: Optional[DayCountConvention] = None,
        name: str = "",
    ):
        """
        Initialize base curve.

        Args:
            reference_date: Curve evaluation date; required for date queries
            day_count: Day-count convention to convert dates to curve times
            name: Optional curve name for identification
        """
        self._reference_date = reference_date
        self._day_count = day_count
        self.name = name

    @property
    def reference_date(self) -> Optional[date]:
        return self._reference_date

    @property
    def day_count(self) -> Optional[DayCountConvention]:
        return self._day_count

    def _to_year_fraction(self, t: TimeLike) -> float:
        """Convert a date or datetime to the curve's year fraction basis."""
        if isinstance(t, numbers.Real):
            return float(t)

        if self.reference_date is None or self.day_count is None:
            raise InvalidInputError(
                f"{self} has no evaluation date; query it by year fraction instead of {t!r}"
            )
        if isinstance(t, datetime):
            t = t.date()
        return self.day_count.year_fraction(self.reference_date, t)

    @abstractmethod
    def zero_rate(self, t: TimeLike, compounding: Compounding = Compounding.CONTINUOUS) -> float:
        """Get zero rate at time t."""
        pass

    def discount(self, t: TimeLike) -> float:
        """Get discount factor at time t."""
        time_frac = self._to_year_fraction(t)
        if time_frac == 0:
            return 1.0
        return zero_rate_to_discount_factor(self.zero_rate(time_frac), time_frac)

    def forward_rate(self, u: TimeLike, v: TimeLike) -> float:
        """Continuously compounded forward rate between times u and v."""
        t1 = self._to_year_fraction(u)
        t2 = self._to_year_fraction(v)
        if t2 <= t1:
            raise InvalidInputError(f"Forward period must be positive: [{t1}, {t2}]")

        log_df1 = math.log(self.discount(t1))
        log_df2 = math.log(self.discount(t2))
        return (log_df1 - log_df2) / (t2 - t1)

    def __str__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.name})"
            if self.name
            else self.__class__.__name__
        )
