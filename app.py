# app.py
import logging

import plotly.graph_objects as go
import streamlit as st

from config import ALPHA_SLIDER, APP_NAME, C_MIN, DEFAULTS, HORIZON_RANGE, MONTH_RANGE, TABLE_ROWS_SHOWN
from exporters import export_monthly_table, export_params
from inputs import build_params
from presets import PRESETS
from scenarios import compare, retire_later
from simulation import SimulationParameters, simulate
from solvers import max_sustainable_withdrawal, required_balance
from ui import exhaustion_label, format_money, header, helptext, kpi

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ------------- Page setup -------------
st.set_page_config(page_title=APP_NAME, page_icon="📈", layout="wide")
header(APP_NAME, "Spend down a fixed BTC stack while the price follows a power law.")

for key, value in DEFAULTS.items():
    st.session_state.setdefault(key, value)

with st.expander("How this works"):
    st.write("""
- Price follows **c · (years since 2009)^α**, evaluated mid-month.
- Each month after retirement we sell enough BTC to raise your USD withdrawal.
- **Required BTC** is a closed-form estimate of the stack that funds the withdrawal forever (needs α > 1).
- **Max sustainable** is the largest monthly withdrawal that doesn't run out within the horizon.
    """)

# ------------- Sidebar (inputs) -------------
st.sidebar.header("Retirement")
yr = st.sidebar.number_input("Retire year", step=1, key="retire_year")
mr = st.sidebar.number_input("Retire month", min_value=MONTH_RANGE[0], max_value=MONTH_RANGE[1],
                             step=1, key="retire_month")
initial_btc = st.sidebar.number_input("BTC at retirement", min_value=0.0, step=0.0001,
                                      format="%.4f", key="initial_balance")
rout = st.sidebar.number_input("Withdrawal r_out (USD / month)", min_value=0, step=100,
                               key="monthly_withdrawal")
horizon = st.sidebar.number_input("Horizon (years)", min_value=HORIZON_RANGE[0],
                                  max_value=HORIZON_RANGE[1], step=1, key="horizon_years")

st.sidebar.header("Price model")
alpha = st.sidebar.slider("α (power exponent)", *ALPHA_SLIDER, key="alpha")
c_lower = st.sidebar.number_input("c (Lower)", min_value=C_MIN, step=0.00001, format="%.5f", key="c_lower")
c_avg = st.sidebar.number_input("c (Average)", min_value=C_MIN, step=0.00001, format="%.5f", key="c_avg")
use_lower = st.sidebar.toggle("Use lower bound c for post-retirement projections",
                              key="use_lower_post_retire")

try:
    params = build_params(yr, mr, initial_btc, rout, alpha, c_lower, c_avg, use_lower, horizon)
except ValueError as exc:
    st.error(str(exc))
    st.stop()


# Every call is pure, so caching on the parameter set is safe.
@st.cache_data(show_spinner=False)
def run_cached(p: SimulationParameters):
    return simulate(p), max_sustainable_withdrawal(p), required_balance(p)


sim, max_rout, req = run_cached(params)

# ------------- KPIs -------------
st.markdown("### Summary")
row1 = st.columns(4)
kpi(row1[0], "BTC @ retirement", f"{sim.summary.balance_at_retire:.6f}")
kpi(row1[1], "Price @ retirement", f"${format_money(sim.summary.price_at_retire)}")
if req.degenerate:
    kpi(row1[2], "Required BTC for r_out", "n/a (α ≤ 1)", tone="bad")
    kpi(row1[3], "Gap (have − need)", "n/a")
else:
    kpi(row1[2], "Required BTC for r_out", f"{req.required_balance:.6f}")
    kpi(row1[3], "Gap (have − need)", f"{req.gap(params.initial_balance):.6f} BTC")

row2 = st.columns(3)
kpi(row2[0], "Total withdrawn (USD)", f"${format_money(sim.summary.total_withdrawn_usd)}")
kpi(row2[1], "Exhausted?", exhaustion_label(sim.exhausted_at), tone="bad" if sim.exhausted else "good")
kpi(row2[2], "Max sustainable r_out", f"${format_money(max_rout)} / mo")

if req.degenerate:
    st.warning("The required-balance formula only converges for α > 1. The simulation above is still valid.")

# ------------- Presets -------------
# Widget state can only be written before the widgets render, hence callbacks.
def _set_state(values: dict):
    for k, v in values.items():
        st.session_state[k] = v


cols = st.columns(len(PRESETS) + 1)
for col, (name, values) in zip(cols, PRESETS.items()):
    col.button(f"Preset {name}", on_click=_set_state, args=(values,))
cols[-1].button("Set r_out = max", on_click=_set_state,
                args=({"monthly_withdrawal": int(round(max_rout))},))

# ------------- Charts -------------
df = sim.to_frame()
st.markdown("### BTC balance & portfolio value")
left, right = st.columns(2)

figB = go.Figure()
figB.add_trace(go.Scatter(x=df["key"], y=df["balance"], mode="lines", name="BTC balance"))
figB.update_layout(title="BTC balance", xaxis_title="Month", yaxis_title="BTC",
                   hovermode="x unified", margin=dict(l=30, r=20, t=60, b=30))
left.plotly_chart(figB, use_container_width=True)

figV = go.Figure()
figV.add_trace(go.Scatter(x=df["key"], y=df["usd_value"], mode="lines", name="USD value"))
if sim.exhausted:
    figV.add_vline(x=sim.exhausted_at.label(), line_dash="dash", line_color="red")
figV.update_layout(title="USD value", xaxis_title="Month", yaxis_title="USD",
                   hovermode="x unified", margin=dict(l=30, r=20, t=60, b=30))
right.plotly_chart(figV, use_container_width=True)

# ------------- Monthly table -------------
st.markdown(f"### Monthly table (first {TABLE_ROWS_SHOWN} rows shown)")
st.dataframe(
    df.head(TABLE_ROWS_SHOWN)[["year", "month", "price", "sold", "balance", "usd_value"]],
    use_container_width=True, hide_index=True,
    column_config={
        "price": st.column_config.NumberColumn("Price (USD)", format="$%.0f"),
        "sold": st.column_config.NumberColumn("Sell BTC", format="%.6f"),
        "balance": st.column_config.NumberColumn("BTC bal", format="%.6f"),
        "usd_value": st.column_config.NumberColumn("USD value", format="$%.0f"),
    },
)

# ------------- Quick what-ifs -------------
st.markdown("### Quick what-ifs")
helptext("Each variant re-runs the simulation, the max-withdrawal search and the required balance.")
if st.button("Run what-ifs"):
    later = retire_later(params, 12)
    results = compare(params, [
        ("As entered", {}),
        ("Withdraw the max", {"monthly_withdrawal": float(round(max_rout))}),
        ("Retire a year later", {"retire": later.retire}),
        ("Average c after retirement", {"use_lower_post_retire": False}),
    ])
    logger.info("What-if comparison ran for %d variants", len(results))
    st.dataframe(
        [{
            "Scenario": name,
            "Exhausted?": exhaustion_label(r["exhausted_at"]),
            "BTC at end": round(r["balance_at_end"], 6),
            "Max r_out": f"${format_money(r['max_withdrawal'])}",
            "Required BTC": round(r["required_balance"], 6),
        } for name, r in results.items()],
        use_container_width=True, hide_index=True,
    )

# ------------- Export -------------
st.markdown("### Export")
name_csv, data_csv = export_monthly_table(sim)
st.download_button("⬇️ Download monthly table (CSV)", data_csv, file_name=name_csv, mime="text/csv")
name_cfg, data_cfg = export_params(params)
st.download_button("⬇️ Download parameters (JSON)", data_cfg, file_name=name_cfg, mime="application/json")

st.markdown("---")
st.caption("Deterministic model, not a forecast. No taxes, fees or price volatility.")
