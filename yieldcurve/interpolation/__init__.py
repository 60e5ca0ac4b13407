"""
Interpolation methods for zero curves.

Piecewise linear and natural cubic spline interpolation of zero rates over
year-fraction pillars, with optional extrapolation of the edge segments.
"""

# Base classes
from .base import Interpolator

# Concrete interpolators
from .cubic import NaturalCubicSplineInterpolator, solve_tridiagonal
from .linear import LinearInterpolator

# Factory
from .factory import InterpolationMethod, create_interpolator, resolve_method

__all__ = [
    # Base classes
    'Interpolator',

    # Interpolation methods
    'LinearInterpolator',
    'NaturalCubicSplineInterpolator',
    'solve_tridiagonal',

    # Factory
    'InterpolationMethod',
    'create_interpolator',
    'resolve_method',
]
