"""Linear vs. natural cubic spline comparison over a zero curve."""

from __future__ import annotations

import logging
from datetime import date
from typing import Sequence, Tuple

import pandas as pd

from yieldcurve.config import DemoConfig
from yieldcurve.conventions.calendars import Calendar, resolve_calendar
from yieldcurve.conventions.dates import format_long_date
from yieldcurve.curves import Compounding, CurveStore, InterpolatedCurve
from yieldcurve.interpolation import InterpolationMethod

logger = logging.getLogger(__name__)

RULE = "-" * 52
HEADER = "Maturity    | Linear Rate | Cubic Spline Rate"
COLUMNS = ["tenor", "maturity_date", "time", "linear", "cubic"]


def build_curves(config: DemoConfig) -> Tuple[CurveStore, InterpolatedCurve, InterpolatedCurve]:
    """Build the curve store and one curve per interpolation method."""
    store = CurveStore.from_tenors(
        config.evaluation_date,
        config.tenor_rates,
        calendar=config.calendar,
        day_count=config.day_count,
    )
    linear = InterpolatedCurve.from_store(store, InterpolationMethod.LINEAR, config.extrapolate)
    cubic = InterpolatedCurve.from_store(store, InterpolationMethod.CUBIC, config.extrapolate)
    return store, linear, cubic


def compare_curves(
    store: CurveStore,
    linear: InterpolatedCurve,
    cubic: InterpolatedCurve,
    tenors: Sequence[str],
    calendar: str | Calendar = "TARGET",
) -> pd.DataFrame:
    """Continuously compounded zero rates of both curves at each test tenor."""
    cal = resolve_calendar(calendar)
    rows = []
    for tenor in tenors:
        target_date = cal.advance(store.evaluation_date, tenor)
        t = store.year_fraction(target_date)
        rows.append(
            {
                "tenor": tenor,
                "maturity_date": target_date,
                "time": t,
                "linear": linear.zero_rate(t, Compounding.CONTINUOUS),
                "cubic": cubic.zero_rate(t, Compounding.CONTINUOUS),
            }
        )
        logger.debug("Compared %s (t=%.6f): %s", tenor, t, rows[-1])
    return pd.DataFrame(rows, columns=COLUMNS)


def format_comparison_table(table: pd.DataFrame, evaluation_date: date) -> str:
    """Render the comparison table in the fixed console layout."""
    lines = [
        f"Evaluation Date: {format_long_date(evaluation_date)}",
        RULE,
        HEADER,
        RULE,
    ]
    for row in table.itertuples(index=False):
        lines.append(f"{row.tenor:<11} |  {row.linear:<10.5f} |  {row.cubic:<10.5f}")
    lines.append(RULE)
    return "\n".join(lines)


def run_demo(config: DemoConfig | None = None) -> str:
    """Build both curves, query every test tenor and return the rendered table."""
    config = config or DemoConfig.default()
    store, linear, cubic = build_curves(config)
    table = compare_curves(store, linear, cubic, config.test_tenors, config.calendar)
    return format_comparison_table(table, store.evaluation_date)
