"""
Solvers built on the power-law price model.

required_balance: closed form for the holding needed at retirement to fund a
withdrawal forever. With price P(x) = c * x**alpha the units sold per year are
12 * r / P(x), and integrating from the retirement offset x_r to infinity gives

    B = 12 * r * x_r / (P(x_r) * (alpha - 1))

The integral only converges for alpha > 1. For alpha <= 1 the (alpha - 1)
floor keeps the arithmetic finite but the number is meaningless; the result
is flagged `degenerate` and should not be shown as an answer.

max_sustainable_withdrawal: bisection on the withdrawal rate, using a full
simulation as the oracle ("does this rate exhaust the holding within the
horizon?").
"""

import logging
from dataclasses import dataclass, replace

from config import (EPOCH_YEAR, EPSILON, SEARCH_MAX_ITER, SEARCH_PRECISION,
                    SEARCH_UPPER_BOUND)
from pricing import price_at_offset
from simulation import SimulationParameters, simulate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequiredBalanceResult:
    required_balance: float
    price_at_retire: float
    t_r: float                  # continuous years since epoch at retirement
    degenerate: bool = False    # alpha <= 1: integral diverges, value is not meaningful

    def gap(self, have: float) -> float:
        """Have minus need; positive is a surplus."""
        return have - self.required_balance


def required_balance(params: SimulationParameters) -> RequiredBalanceResult:
    c = params.coefficient
    rout = params.monthly_withdrawal
    t_r = max(EPSILON, params.retire.year + params.retire.month / 12.0 - EPOCH_YEAR)
    p_r = price_at_offset(c, params.alpha, t_r)
    b_req = (rout * 12 * t_r) / (p_r * max(EPSILON, params.alpha - 1))

    degenerate = params.alpha <= 1
    if degenerate:
        logger.warning(
            "Required balance evaluated with alpha=%.4f <= 1; the perpetual-withdrawal "
            "integral diverges and %.6g is not a meaningful answer", params.alpha, b_req)
    return RequiredBalanceResult(b_req, p_r, t_r, degenerate)


def max_sustainable_withdrawal(params: SimulationParameters,
                               upper_bound: float = SEARCH_UPPER_BOUND,
                               precision: float = SEARCH_PRECISION,
                               max_iter: int = SEARCH_MAX_ITER) -> float:
    """
    Largest monthly withdrawal (USD) that does not exhaust the holding within
    the horizon, to within `precision`. `params.monthly_withdrawal` is ignored.

    `low` never exhausts; `high` exhausts or is the initial ceiling. Returns
    `low`, so the answer errs on the safe side.
    """
    low, high = 0.0, float(upper_bound)
    for i in range(max_iter):
        mid = (low + high) / 2
        sim = simulate(replace(params, monthly_withdrawal=mid))
        if sim.exhausted:
            high = mid
        else:
            low = mid
        logger.debug("bisection %d: low=%.2f high=%.2f", i, low, high)
        if high - low < precision:
            break
    return low
