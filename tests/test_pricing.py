import math

import numpy as np
import pytest

from config import EPSILON, PRICE_FLOOR
from dates import CalendarDate
from pricing import price_at, price_at_offset, price_series, time_offset


def test_time_offset_is_mid_month():
    assert time_offset(CalendarDate(2025, 1)) == pytest.approx(16 + 0.5 / 12)
    assert time_offset(CalendarDate(2009, 1)) == pytest.approx(0.5 / 12)


@pytest.mark.parametrize("date", [CalendarDate(2008, 12), CalendarDate(2000, 1), CalendarDate(1, 1)])
def test_time_offset_floored_before_epoch(date):
    assert time_offset(date) == EPSILON


def test_price_at_retirement_preset():
    expected = 0.0096 * (2025 + 0.5 / 12 - 2009) ** 5.7
    assert price_at(0.0096, 5.7, CalendarDate(2025, 1)) == pytest.approx(expected)


@pytest.mark.parametrize("alpha", [0.1, 0.5, 1.0, 2.0, 5.7, 8.0])
@pytest.mark.parametrize(
    "date", [CalendarDate(2009, 1), CalendarDate(2008, 12), CalendarDate(1990, 6), CalendarDate(2100, 12)]
)
def test_price_positive_and_finite(alpha, date):
    p = price_at(0.00441, alpha, date)
    assert p > 0
    assert math.isfinite(p)


def test_price_before_epoch_converges_to_floor():
    assert price_at(2.0, 3.0, CalendarDate(2000, 1)) == pytest.approx(2.0 * EPSILON ** 3.0)


def test_price_at_offset_floors_non_positive():
    assert price_at_offset(1.0, 2.0, -3.0) == price_at_offset(1.0, 2.0, 0.0) == EPSILON ** 2.0


def test_price_increasing_after_epoch():
    prices = price_series(0.0096, 5.7, CalendarDate(2012, 1), 240)
    assert np.all(np.diff(prices) > 0)


def test_price_series_matches_scalar():
    start = CalendarDate(2024, 11)
    prices = price_series(0.00441, 5.7, start, 30)
    expected = [price_at(0.00441, 5.7, CalendarDate(2024 + (10 + k) // 12, (10 + k) % 12 + 1)) for k in range(30)]
    assert prices == pytest.approx(expected, rel=1e-12)


@pytest.mark.parametrize("alpha", [40.0, 200.0])
def test_price_floor_when_power_underflows(alpha):
    date = CalendarDate(2005, 1)
    assert price_at(0.0096, alpha, date) == PRICE_FLOOR
    assert price_at_offset(0.0096, alpha, 0.0) == PRICE_FLOOR
    assert np.all(price_series(0.0096, alpha, date, 13) == PRICE_FLOOR)


def test_price_floor_covers_zero_coefficient():
    assert price_at(0.0, 5.7, CalendarDate(2025, 1)) == PRICE_FLOOR
