"""
Linear interpolation on zero rates.
"""
from .base import Interpolator


class LinearInterpolator(Interpolator):
    """Piecewise linear interpolation on zero rates.

    Extrapolation extends the slope of the nearest edge segment, so an upward
    sloping curve keeps rising past its last pillar.
    """

    name = "LINEAR"
    min_points = 2

    def _evaluate(self, i: int, t: float) -> float:
        t1, t2 = self.pillars[i], self.pillars[i + 1]
        r1, r2 = self.values[i], self.values[i + 1]

        weight = (t - t1) / (t2 - t1)
        return r1 + (r2 - r1) * weight
