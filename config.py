import sys

APP_NAME = "BTC Win-for-Life"

# Power-law price model: price = c * (t - EPOCH_YEAR) ** alpha
EPOCH_YEAR = 2009
EPSILON = 1e-9                 # floor for the time offset and for (alpha - 1)
PRICE_FLOOR = sys.float_info.min  # smallest normal float; price never reaches 0

# Max-withdrawal bisection (USD / month)
SEARCH_UPPER_BOUND = 1_000_000
SEARCH_PRECISION = 1.0
SEARCH_MAX_ITER = 50

# Input limits enforced by the app before calling the engine
MONTH_RANGE = (1, 12)
HORIZON_RANGE = (1, 120)
ALPHA_SLIDER = (1.0, 8.0, 0.01)  # min, max, step
C_MIN = 0.00001                  # smallest coefficient the inputs accept

TABLE_ROWS_SHOWN = 240

# Default inputs
DEFAULTS = {
    "retire_year": 2025,
    "retire_month": 1,
    "initial_balance": 7.62,       # BTC at retirement
    "monthly_withdrawal": 6000,    # USD per month
    "alpha": 5.7,
    "c_lower": 0.00441,
    "c_avg": 0.0096,
    "use_lower_post_retire": True,
    "horizon_years": 80,
}
