"""
Factory functions for creating interpolators.
"""
from enum import Enum
from typing import Sequence, Union

from yieldcurve.errors import InvalidInputError

from .base import Interpolator
from .cubic import NaturalCubicSplineInterpolator
from .linear import LinearInterpolator


class InterpolationMethod(Enum):
    """Supported zero-rate interpolation methods."""

    LINEAR = "LINEAR"
    CUBIC = "CUBIC"


_ALIASES = {
    "LINEAR": InterpolationMethod.LINEAR,
    "CUBIC": InterpolationMethod.CUBIC,
    "CUBIC_SPLINE": InterpolationMethod.CUBIC,
    "NATURAL_CUBIC": InterpolationMethod.CUBIC,
}

_INTERPOLATORS = {
    InterpolationMethod.LINEAR: LinearInterpolator,
    InterpolationMethod.CUBIC: NaturalCubicSplineInterpolator,
}


def resolve_method(method: Union[str, InterpolationMethod]) -> InterpolationMethod:
    """Map a method name or enum member to an InterpolationMethod."""
    if isinstance(method, InterpolationMethod):
        return method
    try:
        return _ALIASES[method.upper().strip()]
    except KeyError as exc:
        raise InvalidInputError(
            f"Unknown interpolation method: {method}. Available: {list(_ALIASES.keys())}"
        ) from exc


def create_interpolator(method: Union[str, InterpolationMethod],
                        pillars: Sequence[float],
                        values: Sequence[float],
                        extrapolate: bool = False) -> Interpolator:
    """
    Create an interpolator based on method name.

    Args:
        method: Interpolation method (enum member or name such as "LINEAR")
        pillars: Time points, strictly increasing
        values: Zero rates at the pillars
        extrapolate: Allow queries outside the pillar range

    Returns:
        Configured interpolator
    """
    interpolator_cls = _INTERPOLATORS[resolve_method(method)]
    return interpolator_cls(pillars, values, extrapolate=extrapolate)
