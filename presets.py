# Calibration presets for the power-law model. Coefficients are the
# lower-bound and average fits; alpha is the shared exponent.
# Starting points, not forecasts. Keys are SimulationParameters fields.

PRESETS = {
    "c (LB/AVG)": {"c_lower": 0.00441, "c_avg": 0.0096},
    "alpha = 5.7": {"alpha": 5.7},
}
