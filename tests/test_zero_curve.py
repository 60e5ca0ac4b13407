import math
from datetime import date, datetime

import numpy as np
import pytest

from yieldcurve.curves import Compounding, CurveStore, InterpolatedCurve
from yieldcurve.errors import ExtrapolationError, InvalidInputError
from yieldcurve.interpolation import InterpolationMethod
from yieldcurve.schema import CurvePoint

TIMES = [0.5, 1.0, 2.0, 5.0, 10.0, 30.0]
RATES = [0.0300, 0.0350, 0.0375, 0.0400, 0.0425, 0.0450]
POINTS = [CurvePoint(t, r) for t, r in zip(TIMES, RATES)]


@pytest.fixture
def linear() -> InterpolatedCurve:
    return InterpolatedCurve.build(POINTS, InterpolationMethod.LINEAR, extrapolate=True)


@pytest.fixture
def cubic() -> InterpolatedCurve:
    return InterpolatedCurve.build(POINTS, InterpolationMethod.CUBIC, extrapolate=True)


def test_three_month_rate_is_extrapolated_below_first_pillar(linear, cubic) -> None:
    assert linear.zero_rate(0.25) == pytest.approx(0.0275, abs=1e-12)
    assert linear.zero_rate(0.25) < 0.0300
    assert cubic.zero_rate(0.25) != 0.0300


def test_seven_year_rate_lies_between_bracketing_pillars(linear, cubic) -> None:
    assert 0.0400 < linear.zero_rate(7.0) < 0.0425
    assert linear.zero_rate(7.0) == pytest.approx(0.041, abs=1e-12)
    assert 0.0390 <= cubic.zero_rate(7.0) <= 0.0440


def test_forty_year_rate_extends_upward_trend(linear) -> None:
    assert linear.zero_rate(40.0) >= 0.0450
    assert linear.zero_rate(40.0) == pytest.approx(0.04625, abs=1e-12)


@pytest.mark.parametrize("method", ["LINEAR", "CUBIC"])
def test_knots_are_exact(method) -> None:
    curve = InterpolatedCurve.build(POINTS, method)
    assert curve.zero_rates(TIMES) == RATES


def test_extrapolation_disabled_raises() -> None:
    curve = InterpolatedCurve.build(POINTS, "LINEAR", extrapolate=False)
    with pytest.raises(ExtrapolationError):
        curve.zero_rate(40.0)


def test_build_rejects_insufficient_points() -> None:
    with pytest.raises(InvalidInputError):
        InterpolatedCurve.build([], "LINEAR")
    with pytest.raises(InvalidInputError):
        InterpolatedCurve.build(POINTS[:1], "LINEAR")
    with pytest.raises(InvalidInputError):
        InterpolatedCurve.build(POINTS[:2], "CUBIC")


def test_build_rejects_decreasing_times() -> None:
    with pytest.raises(InvalidInputError):
        InterpolatedCurve.build([CurvePoint(1.0, 0.03), CurvePoint(0.5, 0.04)], "LINEAR")


def test_compounding_conversions(linear) -> None:
    t = 2.0
    r = linear.zero_rate(t)
    assert linear.zero_rate(t, Compounding.SIMPLE) == pytest.approx((math.exp(r * t) - 1.0) / t)
    assert linear.zero_rate(t, Compounding.ANNUAL) == pytest.approx(math.exp(r) - 1.0)
    assert linear.zero_rate(t, Compounding.SEMIANNUAL) == pytest.approx(2.0 * (math.exp(r / 2.0) - 1.0))


def test_non_continuous_compounding_needs_positive_time(linear) -> None:
    assert linear.zero_rate(0.0) == pytest.approx(0.0250, abs=1e-12)
    with pytest.raises(InvalidInputError):
        linear.zero_rate(0.0, Compounding.ANNUAL)


def test_discount_and_forward(linear) -> None:
    assert linear.discount(0.0) == 1.0
    assert linear.discount(2.0) == pytest.approx(math.exp(-0.0375 * 2.0))
    expected_fwd = (0.0375 * 2.0 - 0.0350 * 1.0) / 1.0
    assert linear.forward_rate(1.0, 2.0) == pytest.approx(expected_fwd)
    with pytest.raises(InvalidInputError):
        linear.forward_rate(2.0, 1.0)


def test_date_queries_need_an_evaluation_date(linear) -> None:
    with pytest.raises(InvalidInputError):
        linear.zero_rate(date(2030, 1, 1))


def test_curve_from_store_accepts_dates() -> None:
    store = CurveStore.from_tenors(
        date(2025, 1, 1),
        [("6M", 0.030), ("1Y", 0.035), ("2Y", 0.0375)],
        calendar="NULL",
    )
    curve = InterpolatedCurve.from_store(store, InterpolationMethod.CUBIC, extrapolate=True)
    assert curve.reference_date == date(2025, 1, 1)
    assert curve.zero_rate(date(2026, 1, 1)) == 0.035
    assert curve.zero_rate(datetime(2026, 1, 1, 12, 0)) == 0.035
    assert curve.zero_rate(date(2025, 10, 1)) == curve.zero_rate(store.year_fraction(date(2025, 10, 1)))


def test_curves_over_the_same_points_are_independent() -> None:
    linear = InterpolatedCurve.build(POINTS, "LINEAR", extrapolate=True)
    cubic = InterpolatedCurve.build(POINTS, "CUBIC", extrapolate=True)
    assert linear.points == cubic.points
    assert linear.method is InterpolationMethod.LINEAR
    assert cubic.method is InterpolationMethod.CUBIC
    assert str(linear) == "InterpolatedCurve(LINEAR)"
    with pytest.raises(ValueError):
        linear.times[0] = 0.0


@pytest.mark.parametrize(
    "attr, value",
    [
        ("points", ()),
        ("method", InterpolationMethod.CUBIC),
        ("extrapolate", False),
        ("reference_date", date(2030, 1, 1)),
        ("day_count", None),
    ],
)
def test_curve_attributes_are_read_only(linear, attr, value) -> None:
    with pytest.raises(AttributeError):
        setattr(linear, attr, value)
    assert linear.extrapolate is True
    assert linear.zero_rate(40.0) == pytest.approx(0.04625, abs=1e-12)


def test_disabled_extrapolation_cannot_be_switched_on() -> None:
    curve = InterpolatedCurve.build(POINTS, "LINEAR", extrapolate=False)
    with pytest.raises(AttributeError):
        curve.extrapolate = True
    with pytest.raises(ExtrapolationError):
        curve.zero_rate(40.0)


def test_numpy_scalars_are_treated_as_year_fractions(linear) -> None:
    assert linear.zero_rate(np.int64(7)) == pytest.approx(0.041, abs=1e-12)
    assert linear.zero_rate(np.float32(2.0)) == pytest.approx(0.0375, abs=1e-9)
