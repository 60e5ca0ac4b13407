"""
Base classes for curve interpolation methods.
"""
import logging
import math
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from yieldcurve.errors import ExtrapolationError, InvalidInputError

logger = logging.getLogger(__name__)


class Interpolator(ABC):
    """Base class for curve interpolation methods.

    Pillars must be supplied in strictly increasing order; they are never
    re-sorted. Outside the pillar range the edge segment's functional form is
    extended when ``extrapolate`` is set, otherwise the query is rejected.
    """

    name = "BASE"
    min_points = 2

    def __init__(self, pillars: Sequence[float], values: Sequence[float], extrapolate: bool = False):
        """
        Initialize interpolator.

        Args:
            pillars: Time to maturity points (in years), strictly increasing
            values: Values to interpolate (zero rates)
            extrapolate: Allow queries outside [pillars[0], pillars[-1]]
        """
        if len(pillars) != len(values):
            raise InvalidInputError("Pillars and values must have same length")
        if len(pillars) < self.min_points:
            raise InvalidInputError(
                f"{self.name} interpolation needs at least {self.min_points} points, got {len(pillars)}"
            )

        pillar_arr = np.asarray(pillars, dtype=float)
        value_arr = np.asarray(values, dtype=float)
        if not (np.all(np.isfinite(pillar_arr)) and np.all(np.isfinite(value_arr))):
            raise InvalidInputError("Pillars and values must be finite")

        steps = np.diff(pillar_arr)
        if np.any(steps <= 0):
            bad = int(np.argmax(steps <= 0)) + 1
            raise InvalidInputError(
                f"Pillars must be strictly increasing: t[{bad - 1}]={pillar_arr[bad - 1]}, t[{bad}]={pillar_arr[bad]}"
            )

        pillar_arr.flags.writeable = False
        value_arr.flags.writeable = False
        self.pillars = pillar_arr
        self.values = value_arr
        self._extrapolate = extrapolate

    @property
    def extrapolate(self) -> bool:
        return self._extrapolate

    def interpolate(self, t: float) -> float:
        """Interpolate value at time t."""
        t = float(t)
        if not math.isfinite(t):
            raise InvalidInputError(f"Query time must be finite: {t}")

        first, last = self.pillars[0], self.pillars[-1]
        if t < first or t > last:
            if not self.extrapolate:
                raise ExtrapolationError(
                    f"Time {t:.6f} is outside curve range [{first:.6f}, {last:.6f}] "
                    "and extrapolation is disabled"
                )
            logger.debug("%s extrapolation at t=%.6f beyond [%.6f, %.6f]", self.name, t, first, last)
            segment = 0 if t < first else len(self.pillars) - 2
            return float(self._evaluate(segment, t))

        i = int(np.searchsorted(self.pillars, t, side="right")) - 1
        # Knots return their stored value exactly
        if self.pillars[i] == t:
            return float(self.values[i])
        return float(self._evaluate(i, t))

    @abstractmethod
    def _evaluate(self, i: int, t: float) -> float:
        """Evaluate segment ``[pillars[i], pillars[i + 1]]``'s functional form at t."""
        pass
