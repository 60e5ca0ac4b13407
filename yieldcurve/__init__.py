"""Zero Curve Interpolation Toolkit.

This package builds zero-coupon yield curves from dated zero rate quotes and
compares piecewise linear with natural cubic spline interpolation.

Key modules:
- curves: Curve store and interpolated zero curves
- interpolation: Linear and natural cubic spline interpolators
- conventions: Day count, calendars and tenors (QuantLib-backed)
- analysis: Side-by-side comparison table
- cli: Console entry point
"""

from yieldcurve.curves import Compounding, CurveStore, InterpolatedCurve
from yieldcurve.errors import (
    CurveError,
    ExtrapolationError,
    InvalidInputError,
    UnknownError,
)
from yieldcurve.interpolation import InterpolationMethod
from yieldcurve.schema import CurvePoint, MarketQuote

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Curves
    "Compounding",
    "CurveStore",
    "InterpolatedCurve",
    "InterpolationMethod",
    # Schemas
    "CurvePoint",
    "MarketQuote",
    # Errors
    "CurveError",
    "ExtrapolationError",
    "InvalidInputError",
    "UnknownError",
]
