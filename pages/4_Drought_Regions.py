"""
NABR Climate Report — Drought Regions

Flow from drought level to quadrant of the monument, for the whole
record and for each decade from 1980.
"""

import pandas as pd
import streamlit as st

from analysis.classification import flow_counts, flow_windows
from visualization.flow_diagram import build_flow_sankey
from report_data import load_or_stop, start_page

start_page("Drought Regions", "🧭")

st.title("🧭 Drought Regions")
st.caption("Rows counted by drought level and quadrant around the monitoring-grid center")

report = load_or_stop()
table = report.table

windows = flow_windows(table)
tabs = st.tabs(list(windows))
for tab, (label, (start, end)) in zip(tabs, windows.items()):
    with tab:
        counts = flow_counts(table, start, end)
        if counts.empty:
            st.info("No classified rows in this window.")
            continue
        st.plotly_chart(build_flow_sankey(counts, title=label), width="stretch")
        pivot = counts.pivot(index="Drought_Level", columns="Region", values="count").fillna(0)
        st.dataframe(pivot.astype(int))

st.divider()

st.subheader("📐 Classification thresholds")
st.dataframe(pd.DataFrame({
    "Variable": ["Avg temperature", "Avg precipitation"],
    "33rd percentile": [report.t_thresh[0], report.ppt_thresh[0]],
    "66th percentile": [report.t_thresh[1], report.ppt_thresh[1]],
}).round(3), hide_index=True)

n_fallback = int((table["Drought_Branch"] == "fallback").sum())
st.caption(
    f"{n_fallback} of {len(table)} rows are cold-and-dry or hot-and-wet and fall "
    "through to Medium_Arid."
)
