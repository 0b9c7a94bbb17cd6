"""Turn raw form values into a SimulationParameters the engine can trust."""

from config import HORIZON_RANGE, MONTH_RANGE
from dates import CalendarDate
from simulation import SimulationParameters


def parse_amount(val, default: float = 0.0) -> float:
    """Convert '$1,234' / ' 7.62 ' / 6000 to a non-negative float. Blank gives `default`."""

    if val is None or (isinstance(val, str) and not val.strip()):
        return float(default)
    try:
        amt = float(str(val).replace("$", "").replace(",", "").strip())
    except ValueError as exc:
        raise ValueError(f"Invalid amount: {val!r}") from exc
    if amt < 0:
        raise ValueError(f"Amount cannot be negative: {val!r}")
    return amt


def parse_coefficient(val) -> float:
    """A price coefficient: like parse_amount, but zero is rejected too."""

    c = parse_amount(val)
    if c <= 0:
        raise ValueError(f"Price coefficient must be positive: {val!r}")
    return c


def clamp(value: int, bounds: tuple[int, int]) -> int:
    lo, hi = bounds
    return max(lo, min(hi, value))


def clamp_month(month) -> int:
    # a missing or zero month falls back to January
    return clamp(int(month or 1), MONTH_RANGE)


def clamp_horizon(years) -> int:
    return clamp(int(years or 1), HORIZON_RANGE)


def build_params(retire_year, retire_month, initial_balance, monthly_withdrawal,
                 alpha, c_lower, c_avg, use_lower_post_retire, horizon_years) -> SimulationParameters:
    return SimulationParameters(
        c_lower=parse_coefficient(c_lower),
        c_avg=parse_coefficient(c_avg),
        use_lower_post_retire=bool(use_lower_post_retire),
        alpha=float(alpha),
        retire=CalendarDate(int(retire_year or 0), clamp_month(retire_month)),
        initial_balance=parse_amount(initial_balance),
        monthly_withdrawal=parse_amount(monthly_withdrawal),
        horizon_years=clamp_horizon(horizon_years),
    )
