import math
from typing import Optional

import streamlit as st

from dates import CalendarDate


def format_money(x: float, decimals: int = 0) -> str:
    if not math.isfinite(x):
        return "-"
    return f"{x:,.{decimals}f}"


def exhaustion_label(exhausted_at: Optional[CalendarDate]) -> str:
    return exhausted_at.label() if exhausted_at else "No (within horizon)"


def header(title: str, subtitle: str = ""):
    st.markdown(f"## {title}")
    if subtitle:
        st.caption(subtitle)


def kpi(col, caption: str, value: str, tone: str = ""):
    style = {"bad": "color:#e11d48;", "good": "color:#059669;"}.get(tone, "")
    col.markdown(
        f"<div class='card'><div class='caption'>{caption}</div>"
        f"<div class='kpi' style='{style}'>{value}</div></div>",
        unsafe_allow_html=True,
    )


def helptext(text: str):
    st.caption(text)
