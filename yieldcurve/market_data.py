"""Hard-coded market data for the interpolation comparison (curve date: 2025-08-24).

Rates are zero rates in percent, as quoted.
"""

from datetime import date

EVALUATION_DATE = date(2025, 8, 24)

ZERO_QUOTES = [
    {"tenor": "6M", "rate": 3.00},
    {"tenor": "1Y", "rate": 3.50},
    {"tenor": "2Y", "rate": 3.75},
    {"tenor": "5Y", "rate": 4.00},
    {"tenor": "10Y", "rate": 4.25},
    {"tenor": "30Y", "rate": 4.50},
]

TEST_TENORS = ["3M", "7Y", "40Y"]
