# exporters.py
import json
from dataclasses import asdict

import numpy as np

from simulation import SimulationParameters, SimulationResult


def export_monthly_table(result: SimulationResult) -> tuple[str, bytes]:
    df = result.to_frame()
    return "monthly_table.csv", df.to_csv(index=False).encode()


def _json_default(o):
    if isinstance(o, np.ndarray):
        return o.tolist()
    if isinstance(o, (np.float32, np.float64, np.int32, np.int64, np.bool_)):
        return o.item()
    raise TypeError(f"Object of type {o.__class__.__name__} is not JSON serializable")


def export_params(params: SimulationParameters) -> tuple[str, bytes]:
    """Current parameter set as JSON; the retirement date is nested as {year, month}."""
    blob = json.dumps(asdict(params), indent=2, default=_json_default)
    return "parameters.json", blob.encode()
