import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import pandas as pd

from dates import CalendarDate, advance
from pricing import price_at, price_series

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationParameters:
    c_lower: float
    c_avg: float
    use_lower_post_retire: bool   # True = price the retirement with c_lower
    alpha: float                  # power-law exponent
    retire: CalendarDate
    initial_balance: float        # asset units at retirement
    monthly_withdrawal: float = 0.0  # USD per month; ignored by the solvers that search/derive it
    horizon_years: int = 80

    @property
    def coefficient(self) -> float:
        return self.c_lower if self.use_lower_post_retire else self.c_avg

    @property
    def months(self) -> int:
        # month 0 (retirement snapshot) through the horizon inclusive
        return self.horizon_years * 12 + 1


@dataclass(frozen=True)
class MonthlyRecord:
    date: CalendarDate
    price: float
    sold: float           # units sold this month
    balance: float        # after the sale, floored at zero
    usd_value: float
    cumulative_out: float


@dataclass(frozen=True)
class SimulationSummary:
    balance_at_end: float
    usd_at_end: float
    balance_at_retire: float
    price_at_retire: float
    total_withdrawn_usd: float


@dataclass(frozen=True)
class SimulationResult:
    records: Tuple[MonthlyRecord, ...]
    exhausted_at: Optional[CalendarDate]
    summary: SimulationSummary

    @property
    def exhausted(self) -> bool:
        return self.exhausted_at is not None

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({
            "key": [r.date.label() for r in self.records],
            "year": [r.date.year for r in self.records],
            "month": [r.date.month for r in self.records],
            "price": [r.price for r in self.records],
            "sold": [r.sold for r in self.records],
            "balance": [r.balance for r in self.records],
            "usd_value": [r.usd_value for r in self.records],
            "cumulative_out": [r.cumulative_out for r in self.records],
        })


def simulate(params: SimulationParameters) -> SimulationResult:
    """
    Month-by-month depletion of the holding under a fixed USD withdrawal.

    Month 0 is the retirement snapshot (no sale). From month 1 on, each
    month sells withdrawal / price units. The first month the balance would
    go negative is recorded as the exhaustion date; the balance is floored
    at zero from then on, while withdrawals keep counting toward the total.
    """
    c = params.coefficient
    rout = params.monthly_withdrawal
    prices = price_series(c, params.alpha, params.retire, params.months)

    balance = params.initial_balance
    cumulative_out = 0.0
    exhausted_at = None
    records = []

    for k in range(params.months):
        date = advance(params.retire, k)
        price = float(prices[k])

        sold = 0.0
        if rout > 0 and k > 0:
            sold = rout / price
            balance -= sold
            cumulative_out += rout
            if balance < 0 and exhausted_at is None:
                exhausted_at = date
                logger.debug("Balance exhausted at %s (month %d)", date.label(), k)
            balance = max(0.0, balance)

        records.append(MonthlyRecord(
            date=date,
            price=price,
            sold=sold,
            balance=balance,
            usd_value=balance * price,
            cumulative_out=cumulative_out,
        ))

    last = records[-1]
    summary = SimulationSummary(
        balance_at_end=last.balance,
        usd_at_end=last.usd_value,
        balance_at_retire=params.initial_balance,
        price_at_retire=price_at(c, params.alpha, params.retire),
        total_withdrawn_usd=cumulative_out,
    )
    return SimulationResult(tuple(records), exhausted_at, summary)
