"""
NABR Climate Report — Dry Soil Days

The five points with the most summer dry-soil days, and how soil water
at those points moves through the seasons year by year.
"""

import streamlit as st
from streamlit_folium import st_folium

from config.constants import DRY_SOIL_DAYS, TOP_N, VWC_FIELDS
from analysis.aggregation import (
    annual_summary, driest_locations, location_summary, select_locations,
)
from visualization.site_map import build_site_map
from visualization.time_series import build_seasonal_timeline
from report_data import load_or_stop, start_page

start_page("Dry Soil Days", "🌵")

st.title("🌵 Dry Soil Days")
st.caption("Summer dry-soil days summed over every year of the record")

obs = load_or_stop().observations

top = driest_locations(obs, n=TOP_N)
summary = location_summary(obs, {DRY_SOIL_DAYS: "sum"})

map_col, rank_col = st.columns([1.3, 1.0], gap="medium")
with map_col:
    st_folium(
        build_site_map(summary, DRY_SOIL_DAYS, caption="Total summer dry-soil days", highlight=top),
        height=420, width="100%", returned_objects=[],
    )
with rank_col:
    st.subheader(f"Top {len(top)} driest points")
    st.dataframe(
        top[["rank", "site", DRY_SOIL_DAYS]].rename(columns={DRY_SOIL_DAYS: "Dry soil days"}),
        hide_index=True,
    )
    st.markdown(
        "Ranking uses the total across all historic and near-term years; "
        "points with equal totals keep the order in which they appear in the data."
    )

st.divider()

st.subheader("💧 Seasonal soil water at the driest points")
annual = annual_summary(
    select_locations(obs, top),
    {col: "mean" for col in VWC_FIELDS.values()},
)
st.plotly_chart(
    build_seasonal_timeline(annual),
    width="stretch",
)
st.caption("Use the dropdown to switch season and the buttons above the axis to zoom in time.")
