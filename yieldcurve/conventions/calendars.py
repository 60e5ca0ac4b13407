"""
QuantLib-backed calendars used to roll curve dates forward by a tenor.

Holiday rules belong to QuantLib; this module only selects a calendar by name
and exposes the date arithmetic the curve builder needs.
"""

from datetime import date, datetime
from typing import Dict, Union

import QuantLib as ql

from yieldcurve.conventions.dates import to_py_date, to_ql_date
from yieldcurve.conventions.tenors import tenor_to_period
from yieldcurve.errors import InvalidInputError


class Calendar:
    """Base calendar class for QuantLib-backed date advancement."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return self._ql_calendar.isBusinessDay(to_ql_date(dt))

    def advance(self, start_date: Union[date, datetime], tenor: str) -> date:
        """Advance a date by a tenor string, rolling to the following business day."""
        ql_result = self._ql_calendar.advance(to_ql_date(start_date), tenor_to_period(tenor))
        return to_py_date(ql_result)

    def __str__(self) -> str:
        return self.name


class TargetCalendar(Calendar):
    """TARGET (Trans-European Automated Real-time Gross settlement Express Transfer) calendar."""

    def __init__(self):
        super().__init__("TARGET", ql.TARGET())


class WeekendCalendar(Calendar):
    """Simple calendar that only considers weekends as non-business days."""

    def __init__(self):
        super().__init__("WEEKEND", ql.WeekendsOnly())


class NullCalendar(Calendar):
    """Every day is a business day; tenors add plain calendar months/years."""

    def __init__(self):
        super().__init__("NULL", ql.NullCalendar())


TARGET = TargetCalendar()
WEEKEND_ONLY = WeekendCalendar()
NULL = NullCalendar()

CALENDARS: Dict[str, Calendar] = {
    "TARGET": TARGET,
    "EUR": TARGET,  # Alias
    "WEEKEND": WEEKEND_ONLY,
    "NULL": NULL,
    "NONE": NULL,
}


def get_calendar(name: str) -> Calendar:
    """Get a calendar by name ("TARGET", "EUR", "WEEKEND", "NULL" or "NONE")."""
    key = name.upper().strip()
    if key not in CALENDARS:
        raise InvalidInputError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]


def resolve_calendar(calendar: Union[str, Calendar]) -> Calendar:
    """Accept either a registered calendar name or a Calendar instance."""
    if isinstance(calendar, Calendar):
        return calendar
    return get_calendar(calendar)
