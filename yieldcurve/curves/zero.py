"""
Interpolated zero curve over a fixed set of pillars.
"""
import logging
from datetime import date
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from yieldcurve.conventions.daycount import DayCountConvention
from yieldcurve.interpolation import InterpolationMethod, Interpolator, create_interpolator, resolve_method
from yieldcurve.schema.quotes import CurvePoint

from .base import BaseCurve, TimeLike
from .compounding import Compounding, convert_continuous_rate
from .store import CurveStore

logger = logging.getLogger(__name__)


class InterpolatedCurve(BaseCurve):
    """
    Zero curve interpolating continuously compounded zero rates.

    The pillars, method and extrapolation flag are fixed at construction, so
    a curve can be shared freely between readers.
    """

    def __init__(
        self,
        points: Sequence[CurvePoint],
        method: Union[str, InterpolationMethod] = InterpolationMethod.LINEAR,
        extrapolate: bool = False,
        reference_date: Optional[date] = None,
        day_count: Optional[DayCountConvention] = None,
        name: str = "",
    ):
        """
        Initialize interpolated zero curve.

        Args:
            points: Curve points with strictly increasing times
            method: LINEAR or CUBIC
            extrapolate: Allow queries outside the pillar range
            reference_date: Evaluation date the pillar times are measured from
            day_count: Day count used to turn query dates into times
            name: Curve name
        """
        method = resolve_method(method)
        super().__init__(reference_date, day_count, name or method.value)

        self._points = tuple(points)
        self._method = method
        self._interpolator: Interpolator = create_interpolator(
            method,
            [p.t for p in self._points],
            [p.rate for p in self._points],
            extrapolate=extrapolate,
        )
        logger.debug(
            "Built %s curve with %d pillars (extrapolation %s)",
            method.value,
            len(self._points),
            "enabled" if extrapolate else "disabled",
        )

    @classmethod
    def build(
        cls,
        points: Sequence[CurvePoint],
        method: Union[str, InterpolationMethod],
        extrapolate: bool = False,
    ) -> "InterpolatedCurve":
        """Build a curve queried by year fraction only."""
        return cls(points, method, extrapolate)

    @classmethod
    def from_store(
        cls,
        store: CurveStore,
        method: Union[str, InterpolationMethod],
        extrapolate: bool = False,
    ) -> "InterpolatedCurve":
        """Build a curve over a store's points that also accepts date queries."""
        return cls(
            store.points,
            method,
            extrapolate,
            reference_date=store.evaluation_date,
            day_count=store.day_count,
        )

    @property
    def points(self) -> Tuple[CurvePoint, ...]:
        return self._points

    @property
    def method(self) -> InterpolationMethod:
        return self._method

    @property
    def extrapolate(self) -> bool:
        return self._interpolator.extrapolate

    @property
    def times(self) -> np.ndarray:
        return self._interpolator.pillars

    @property
    def rates(self) -> np.ndarray:
        return self._interpolator.values

    def zero_rate(self, t: TimeLike, compounding: Compounding = Compounding.CONTINUOUS) -> float:
        """Zero rate at time t (year fraction or date) under the requested compounding."""
        time_frac = self._to_year_fraction(t)
        rate = self._interpolator.interpolate(time_frac)
        return convert_continuous_rate(rate, time_frac, compounding)

    def zero_rates(self, times: Sequence[TimeLike],
                   compounding: Compounding = Compounding.CONTINUOUS) -> List[float]:
        """Zero rates at several times."""
        return [self.zero_rate(t, compounding) for t in times]
