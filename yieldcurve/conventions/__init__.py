"""
Market conventions: day counts, calendars, tenors and date helpers.
"""

from .calendars import Calendar, get_calendar, resolve_calendar
from .dates import format_long_date, to_date
from .daycount import (
    ACT_365F,
    DayCountConvention,
    get_day_count_convention,
    resolve_day_count,
)
from .tenors import parse_tenor, tenor_to_months, tenor_to_period

__all__ = [
    # Calendars
    "Calendar",
    "get_calendar",
    "resolve_calendar",
    # Day counts
    "ACT_365F",
    "DayCountConvention",
    "get_day_count_convention",
    "resolve_day_count",
    # Tenors and dates
    "parse_tenor",
    "tenor_to_months",
    "tenor_to_period",
    "format_long_date",
    "to_date",
]
