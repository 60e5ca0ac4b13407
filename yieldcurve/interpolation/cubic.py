"""
Natural cubic spline interpolation on zero rates.
"""
import logging
from typing import Sequence

import numpy as np

from .base import Interpolator

logger = logging.getLogger(__name__)


def solve_tridiagonal(
    lower: np.ndarray, diag: np.ndarray, upper: np.ndarray, rhs: np.ndarray
) -> np.ndarray:
    """Solve a tridiagonal system with the Thomas algorithm.

    Args:
        lower: Sub-diagonal, length n - 1
        diag: Main diagonal, length n
        upper: Super-diagonal, length n - 1
        rhs: Right-hand side, length n

    Returns:
        Solution vector of length n
    """
    n = len(diag)
    c_prime = np.zeros(n, dtype=float)
    d_prime = np.zeros(n, dtype=float)

    c_prime[0] = upper[0] / diag[0] if n > 1 else 0.0
    d_prime[0] = rhs[0] / diag[0]
    for k in range(1, n):
        denom = diag[k] - lower[k - 1] * c_prime[k - 1]
        if k < n - 1:
            c_prime[k] = upper[k] / denom
        d_prime[k] = (rhs[k] - lower[k - 1] * d_prime[k - 1]) / denom

    x = np.zeros(n, dtype=float)
    x[-1] = d_prime[-1]
    for k in range(n - 2, -1, -1):
        x[k] = d_prime[k] - c_prime[k] * x[k + 1]
    return x


class NaturalCubicSplineInterpolator(Interpolator):
    """Natural cubic spline through all pillars.

    Value, first and second derivatives are continuous at interior pillars and
    the second derivative vanishes at both end pillars. Extrapolation keeps
    evaluating the edge segment's cubic polynomial.
    """

    name = "CUBIC"
    min_points = 3

    def __init__(self, pillars: Sequence[float], values: Sequence[float], extrapolate: bool = False):
        super().__init__(pillars, values, extrapolate)
        self.second_derivatives = self._natural_second_derivatives()
        self.second_derivatives.flags.writeable = False

    def _natural_second_derivatives(self) -> np.ndarray:
        """Second derivatives M_i at the pillars with M_0 = M_{n-1} = 0."""
        h = np.diff(self.pillars)
        slopes = np.diff(self.values) / h
        n = len(self.pillars)

        # Interior equations i = 1..n-2:
        # h[i-1] M[i-1] + 2 (h[i-1] + h[i]) M[i] + h[i] M[i+1] = 6 (slopes[i] - slopes[i-1])
        diag = 2.0 * (h[:-1] + h[1:])
        lower = h[1:-1]
        upper = h[1:-1]
        rhs = 6.0 * (slopes[1:] - slopes[:-1])

        moments = np.zeros(n, dtype=float)
        moments[1:-1] = solve_tridiagonal(lower, diag, upper, rhs)
        logger.debug("Natural spline second derivatives: %s", moments)
        return moments

    def _evaluate(self, i: int, t: float) -> float:
        t1, t2 = self.pillars[i], self.pillars[i + 1]
        r1, r2 = self.values[i], self.values[i + 1]
        m1, m2 = self.second_derivatives[i], self.second_derivatives[i + 1]

        h = t2 - t1
        a = (t2 - t) / h
        b = (t - t1) / h
        return a * r1 + b * r2 + ((a ** 3 - a) * m1 + (b ** 3 - b) * m2) * h * h / 6.0
