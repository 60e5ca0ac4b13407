"""
Market data schemas for the yield curve builder.
"""

from .quotes import CurvePoint, MarketQuote

__all__ = [
    "CurvePoint",
    "MarketQuote",
]
