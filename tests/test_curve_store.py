from datetime import date

import pytest

from yieldcurve.conventions import ACT_365F
from yieldcurve.curves import CurveStore
from yieldcurve.errors import InvalidInputError
from yieldcurve.schema import CurvePoint, MarketQuote

EVAL = date(2025, 1, 1)


def _quotes() -> list:
    return [
        MarketQuote(date(2025, 7, 1), 0.030, "6M"),
        MarketQuote(date(2026, 1, 1), 0.035, "1Y"),
        MarketQuote(date(2027, 1, 1), 0.0375, "2Y"),
    ]


def test_build_converts_maturities_to_act365_times() -> None:
    store = CurveStore.build(EVAL, _quotes())
    assert store.points == (
        CurvePoint(t=181 / 365, rate=0.030),
        CurvePoint(t=1.0, rate=0.035),
        CurvePoint(t=730 / 365, rate=0.0375),
    )
    assert store.times == (181 / 365, 1.0, 2.0)
    assert store.rates == (0.030, 0.035, 0.0375)
    assert store.day_count is ACT_365F
    assert len(store) == 3


def test_build_accepts_string_evaluation_date() -> None:
    store = CurveStore.build("2025-01-01", _quotes(), day_count="ACT/365F")
    assert store.evaluation_date == EVAL


def test_empty_quotes_rejected() -> None:
    with pytest.raises(InvalidInputError):
        CurveStore.build(EVAL, [])


def test_duplicate_maturity_rejected() -> None:
    quotes = _quotes()
    quotes.append(MarketQuote(date(2027, 1, 1), 0.04))
    with pytest.raises(InvalidInputError, match="Duplicate"):
        CurveStore.build(EVAL, quotes)


def test_out_of_order_maturities_rejected() -> None:
    quotes = list(reversed(_quotes()))
    with pytest.raises(InvalidInputError, match="increasing"):
        CurveStore.build(EVAL, quotes)


def test_maturity_before_evaluation_date_rejected() -> None:
    with pytest.raises(InvalidInputError):
        CurveStore.build(date(2025, 8, 1), _quotes())


def test_unknown_day_count_rejected() -> None:
    with pytest.raises(InvalidInputError):
        CurveStore.build(EVAL, _quotes(), day_count="BUS/252")


def test_non_finite_quote_rejected() -> None:
    with pytest.raises(InvalidInputError):
        MarketQuote(date(2026, 1, 1), float("inf"))


def test_store_is_immutable() -> None:
    store = CurveStore.build(EVAL, _quotes())
    with pytest.raises(AttributeError):
        store.points = ()
    with pytest.raises(AttributeError):
        store.points[0].rate = 0.5


def test_from_tenors_rolls_each_tenor_on_the_calendar() -> None:
    store = CurveStore.from_tenors(
        EVAL,
        [("6M", 0.030), ("1Y", 0.035), ("2Y", 0.0375)],
        calendar="NULL",
    )
    assert [q.maturity_date for q in store.quotes] == [
        date(2025, 7, 1),
        date(2026, 1, 1),
        date(2027, 1, 1),
    ]
    assert [q.tenor for q in store.quotes] == ["6M", "1Y", "2Y"]


def test_from_tenors_accepts_mapping_and_target_calendar() -> None:
    store = CurveStore.from_tenors(EVAL, {"6M": 0.030, "1Y": 0.035})
    # 2026-01-01 is a TARGET holiday
    assert store.quotes[1].maturity_date == date(2026, 1, 2)
    assert store.times[1] == pytest.approx(366 / 365)


def test_year_fraction_uses_store_evaluation_date() -> None:
    store = CurveStore.build(EVAL, _quotes())
    assert store.year_fraction(date(2025, 4, 1)) == pytest.approx(90 / 365)


@pytest.mark.parametrize("evaluation_date", ["2025/01/01", "01-01-2025", 20250101, None])
def test_malformed_evaluation_date_rejected(evaluation_date) -> None:
    with pytest.raises(InvalidInputError):
        CurveStore.build(evaluation_date, _quotes())
    with pytest.raises(InvalidInputError):
        CurveStore.from_tenors(evaluation_date, [("6M", 0.030), ("1Y", 0.035)])
