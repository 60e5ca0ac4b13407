"""Configuration knobs for the curve comparison run."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from yieldcurve import market_data


@dataclass(frozen=True)
class DemoConfig:
    """Inputs of a linear vs. cubic comparison run."""

    evaluation_date: date
    # (tenor, zero rate in decimal) in maturity order
    tenor_rates: Tuple[Tuple[str, float], ...]
    test_tenors: Tuple[str, ...]
    calendar: str = "TARGET"
    day_count: str = "ACT/365F"
    extrapolate: bool = True

    @classmethod
    def default(cls) -> DemoConfig:
        """Configuration built from the hard-coded market data."""
        return cls(
            evaluation_date=market_data.EVALUATION_DATE,
            tenor_rates=tuple(
                (q["tenor"], q["rate"] / 100.0) for q in market_data.ZERO_QUOTES
            ),
            test_tenors=tuple(market_data.TEST_TENORS),
        )
