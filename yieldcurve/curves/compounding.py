"""
Compounding conventions and conversions between zero rates and discount factors.
"""
import math
from enum import Enum

from yieldcurve.errors import InvalidInputError


class Compounding(Enum):
    """Compounding convention of a quoted zero rate (value = periods per year)."""

    CONTINUOUS = 0
    SIMPLE = -1
    ANNUAL = 1
    SEMIANNUAL = 2
    QUARTERLY = 4
    MONTHLY = 12


def zero_rate_to_discount_factor(rate: float, time: float) -> float:
    """Convert continuously compounded zero rate to discount factor."""
    return math.exp(-rate * time)


def discount_factor_to_zero_rate(df: float, time: float,
                                 compounding: Compounding = Compounding.CONTINUOUS) -> float:
    """Convert discount factor to a zero rate under the given compounding."""
    if df <= 0:
        raise InvalidInputError(f"Discount factor must be positive: {df}")
    if time <= 0:
        raise InvalidInputError(f"Time must be positive: {time}")

    if compounding is Compounding.CONTINUOUS:
        return -math.log(df) / time
    if compounding is Compounding.SIMPLE:
        return (1.0 / df - 1.0) / time

    freq = compounding.value
    return freq * (df ** (-1.0 / (freq * time)) - 1.0)


def convert_continuous_rate(rate: float, time: float, compounding: Compounding) -> float:
    """Express a continuously compounded zero rate under another compounding."""
    if compounding is Compounding.CONTINUOUS:
        return rate
    if time <= 0:
        raise InvalidInputError(
            f"{compounding.name.lower()} compounding needs a positive time, got {time}"
        )
    return discount_factor_to_zero_rate(zero_rate_to_discount_factor(rate, time), time, compounding)
