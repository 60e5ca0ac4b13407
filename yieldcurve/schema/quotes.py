"""
Market quote and curve point schemas.
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Optional

from yieldcurve.errors import InvalidInputError


@dataclass(frozen=True)
class MarketQuote:
    """Zero rate quote for a single maturity date."""

    maturity_date: date
    rate: float  # Continuously compounded zero rate in decimal (e.g., 0.035 for 3.5%)
    tenor: Optional[str] = None  # "6M", "1Y", ... when the quote came from a tenor

    def __post_init__(self):
        if not math.isfinite(self.rate):
            raise InvalidInputError(f"Quote rate must be finite: {self.rate}")


@dataclass(frozen=True)
class CurvePoint:
    """Pillar of a zero curve: year fraction from the evaluation date and its zero rate."""

    t: float
    rate: float
