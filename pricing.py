"""
Deterministic power-law price model.

    price = c * x ** alpha,   x = years elapsed since EPOCH_YEAR

Monthly prices are taken at mid-month, so a (year, month) maps to
t = year + (month - 0.5) / 12. The elapsed time is floored at EPSILON so a
date on or before the epoch never yields a zero/negative base, and the price
is floored at PRICE_FLOOR so it stays strictly positive when x ** alpha
underflows.
"""

import numpy as np

from config import EPOCH_YEAR, EPSILON, PRICE_FLOOR
from dates import CalendarDate


def time_offset(date: CalendarDate) -> float:
    """Years since the epoch at the middle of the month, floored at EPSILON."""
    t = date.year + (date.month - 0.5) / 12.0
    return max(EPSILON, t - EPOCH_YEAR)


def _floored(p):
    # x ** alpha underflows to 0.0 for x near EPSILON and large alpha
    return np.maximum(p, PRICE_FLOOR)


def price_at_offset(c: float, alpha: float, x: float) -> float:
    """Price for a continuous time offset x (years since epoch)."""
    return float(_floored(c * np.power(max(EPSILON, x), alpha)))


def price_at(c: float, alpha: float, date: CalendarDate) -> float:
    return float(_floored(c * np.power(time_offset(date), alpha)))


def price_series(c: float, alpha: float, start: CalendarDate, months: int) -> np.ndarray:
    """
    Prices for `months` consecutive months beginning at `start` (month 0).
    Same arithmetic as price_at, vectorised for the whole horizon.
    """
    idx = start.to_index() + np.arange(months)
    years, m0 = np.divmod(idx, 12)
    t = years + (m0 + 0.5) / 12.0
    x = np.maximum(EPSILON, t - EPOCH_YEAR)
    return _floored(c * np.power(x, alpha))
