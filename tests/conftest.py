import numpy as np
import pytest

from dates import CalendarDate
from simulation import SimulationParameters


@pytest.fixture
def base_params():
    # c_avg drives the price (use_lower_post_retire=False)
    return SimulationParameters(
        c_lower=0.00441,
        c_avg=0.0096,
        use_lower_post_retire=False,
        alpha=5.7,
        retire=CalendarDate(2025, 1),
        initial_balance=7.62,
        monthly_withdrawal=6000,
        horizon_years=80,
    )


def random_params(seed: int, **overrides) -> SimulationParameters:
    """Parameter set drawn from ranges where the bisection ceiling is never reached."""
    rng = np.random.default_rng(seed)
    kw = dict(
        c_lower=float(rng.uniform(0.002, 0.01)),
        c_avg=float(rng.uniform(0.002, 0.01)),
        use_lower_post_retire=bool(rng.integers(0, 2)),
        alpha=float(rng.uniform(2.0, 6.0)),
        retire=CalendarDate(int(rng.integers(2015, 2031)), int(rng.integers(1, 13))),
        initial_balance=float(rng.uniform(0.1, 5.0)),
        monthly_withdrawal=float(rng.uniform(100, 20_000)),
        horizon_years=int(rng.integers(5, 41)),
    )
    kw.update(overrides)
    return SimulationParameters(**kw)


@pytest.fixture
def make_params():
    return random_params
