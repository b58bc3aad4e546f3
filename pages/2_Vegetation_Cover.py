"""
NABR Climate Report — Vegetation Cover

The five most vegetated points (lowest mean bare ground) and their
ground-cover make-up, plus dry-soil days by decade.
"""

import streamlit as st

from config.constants import COVER_LABELS, DRY_SOIL_DAYS, TOP_N
from analysis.aggregation import decade_summary, most_vegetated_locations
from visualization.bar_chart import build_cover_bar, build_decade_bar
from report_data import load_or_stop, start_page

start_page("Vegetation Cover", "🌿")

st.title("🌿 Vegetation Cover")
st.caption("Mean ground-cover fractions per monitoring point across all years")

obs = load_or_stop().observations

top = most_vegetated_locations(obs, n=TOP_N)

bar_col, table_col = st.columns([1.5, 1.0], gap="medium")
with bar_col:
    st.plotly_chart(build_cover_bar(top), width="stretch")
with table_col:
    st.subheader(f"Top {len(top)} most vegetated points")
    shown = top[["rank", "site"] + [c for c in COVER_LABELS if c in top.columns]]
    st.dataframe(shown.rename(columns=COVER_LABELS).round(1), hide_index=True)

st.divider()

st.subheader("📅 Dry-soil days by decade")
decades = decade_summary(obs, {DRY_SOIL_DAYS: "mean"})
st.plotly_chart(
    build_decade_bar(decades, DRY_SOIL_DAYS, title="Mean summer dry-soil days per point-year"),
    width="stretch",
    config={"displayModeBar": False},
)
