"""
Curves package - zero curve construction and queries.

Main APIs:
---------
    - CurveStore: market quotes converted to year-fraction pillars
    - InterpolatedCurve: linear or natural cubic spline zero curve
    - Compounding: compounding conventions for zero rate queries
"""

from .base import BaseCurve
from .compounding import (
    Compounding,
    convert_continuous_rate,
    discount_factor_to_zero_rate,
    zero_rate_to_discount_factor,
)
from .store import CurveStore
from .zero import InterpolatedCurve

__all__ = [
    "BaseCurve",
    "CurveStore",
    "InterpolatedCurve",
    # Compounding
    "Compounding",
    "convert_continuous_rate",
    "discount_factor_to_zero_rate",
    "zero_rate_to_discount_factor",
]
