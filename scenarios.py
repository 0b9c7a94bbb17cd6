from dataclasses import replace

from dates import advance
from simulation import SimulationParameters, simulate
from solvers import max_sustainable_withdrawal, required_balance


def clone_params(params: SimulationParameters, **overrides) -> SimulationParameters:
    return replace(params, **overrides)


def retire_later(params: SimulationParameters, months: int) -> SimulationParameters:
    return replace(params, retire=advance(params.retire, months))


def compare(params_main: SimulationParameters, variants: list[tuple[str, dict]]):
    """
    variants: list of (name, overrides-dict)
    returns: dict name -> {"exhausted_at", "balance_at_end", "max_withdrawal", "required_balance"}
    """
    res = {}
    for name, edits in variants:
        p = clone_params(params_main, **edits)
        sim = simulate(p)
        res[name] = {
            "exhausted_at": sim.exhausted_at,
            "balance_at_end": sim.summary.balance_at_end,
            "max_withdrawal": max_sustainable_withdrawal(p),
            "required_balance": required_balance(p).required_balance,
        }
    return res
