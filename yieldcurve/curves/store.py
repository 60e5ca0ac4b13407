"""
Curve store: market quotes turned into year-fraction curve points.
"""
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Mapping, Sequence, Tuple, Union

from yieldcurve.conventions.calendars import Calendar, resolve_calendar
from yieldcurve.conventions.dates import to_date
from yieldcurve.conventions.daycount import DayCountConvention, resolve_day_count
from yieldcurve.errors import InvalidInputError
from yieldcurve.schema.quotes import CurvePoint, MarketQuote

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurveStore:
    """Ordered, immutable zero curve pillars measured from an evaluation date.

    Every date-to-time conversion uses the store's own evaluation date and day
    count; nothing is read from process-wide settings.
    """

    evaluation_date: date
    day_count: DayCountConvention
    quotes: Tuple[MarketQuote, ...]
    points: Tuple[CurvePoint, ...]

    @classmethod
    def build(
        cls,
        evaluation_date: Union[date, datetime, str],
        quotes: Sequence[MarketQuote],
        day_count: Union[str, DayCountConvention] = "ACT/365F",
    ) -> "CurveStore":
        """
        Build a store from quotes ordered by maturity.

        Args:
            evaluation_date: Reference date the curve times are measured from
            quotes: Market quotes in strictly increasing maturity order
            day_count: Day count convention name or instance

        Raises:
            InvalidInputError: If quotes are empty, duplicated, out of order
                or mature before the evaluation date
        """
        eval_date = to_date(evaluation_date)
        dcc = resolve_day_count(day_count)
        quotes = tuple(quotes)

        if not quotes:
            raise InvalidInputError("At least one market quote is required to build a curve")

        for prev, curr in zip(quotes, quotes[1:]):
            if curr.maturity_date == prev.maturity_date:
                raise InvalidInputError(f"Duplicate maturity date: {curr.maturity_date}")
            if curr.maturity_date < prev.maturity_date:
                raise InvalidInputError(
                    f"Quotes must be in increasing maturity order: "
                    f"{prev.maturity_date} is followed by {curr.maturity_date}"
                )

        if quotes[0].maturity_date < eval_date:
            raise InvalidInputError(
                f"Maturity {quotes[0].maturity_date} precedes evaluation date {eval_date}"
            )

        points = [
            CurvePoint(t=dcc.year_fraction(eval_date, q.maturity_date), rate=q.rate)
            for q in quotes
        ]

        logger.debug(
            "Built curve store on %s with %d points (%s, t=%.4f..%.4f)",
            eval_date,
            len(points),
            dcc,
            points[0].t,
            points[-1].t,
        )
        return cls(evaluation_date=eval_date, day_count=dcc, quotes=quotes, points=tuple(points))

    @classmethod
    def from_tenors(
        cls,
        evaluation_date: Union[date, datetime, str],
        tenor_rates: Union[Mapping[str, float], Iterable[Tuple[str, float]]],
        calendar: Union[str, Calendar] = "TARGET",
        day_count: Union[str, DayCountConvention] = "ACT/365F",
    ) -> "CurveStore":
        """
        Build a store from (tenor, rate) pairs, rolling each tenor on a calendar.

        Args:
            evaluation_date: Reference date
            tenor_rates: Ordered tenor -> zero rate (decimal) pairs
            calendar: Calendar used to advance the evaluation date by each tenor
            day_count: Day count convention name or instance
        """
        eval_date = to_date(evaluation_date)
        cal = resolve_calendar(calendar)
        items = tenor_rates.items() if isinstance(tenor_rates, Mapping) else tenor_rates

        quotes = [
            MarketQuote(maturity_date=cal.advance(eval_date, tenor), rate=rate, tenor=tenor)
            for tenor, rate in items
        ]
        return cls.build(eval_date, quotes, day_count)

    @property
    def times(self) -> Tuple[float, ...]:
        return tuple(p.t for p in self.points)

    @property
    def rates(self) -> Tuple[float, ...]:
        return tuple(p.rate for p in self.points)

    def year_fraction(self, dt: Union[date, datetime, str]) -> float:
        """Curve time of a date, measured from the evaluation date."""
        return self.day_count.year_fraction(self.evaluation_date, to_date(dt))

    def __len__(self) -> int:
        return len(self.points)
