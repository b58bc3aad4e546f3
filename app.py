"""
NABR Climate Report — Home Page
================================
Climate, soil-water and vegetation at Natural Bridges National Monument

Entry point: streamlit run app.py
"""

import streamlit as st
from streamlit_folium import st_folium

from config.constants import DRY_SOIL_DAYS, REGIONS, DROUGHT_LEVELS, YEAR_COL
from config.data_sources import DATA_SOURCES, PARK
from analysis.aggregation import driest_locations, location_summary
from visualization.site_map import build_site_map
from report_data import load_or_stop, start_page

start_page("Overview", "🏜")

st.title(f"🏜 {PARK['name']} — Climate & Soil Water Report")
st.caption(
    f"{PARK['group']} · point-based climate, soil moisture and ground-cover "
    "observations, historic record plus near-term projections"
)

report = load_or_stop()
obs = report.observations

# ─────────────────────────────────────────────────────────────────────────────
# Headline numbers
# ─────────────────────────────────────────────────────────────────────────────
n_sites = obs.groupby(["long", "lat"]).ngroups
m1, m2, m3, m4 = st.columns(4)
m1.metric("Monitoring points", f"{n_sites}")
m2.metric("Observation rows", f"{len(obs):,}")
m3.metric("Years", f"{int(obs[YEAR_COL].min())}–{int(obs[YEAR_COL].max())}")
m4.metric("Mean summer dry-soil days", f"{obs[DRY_SOIL_DAYS].mean():.1f}")

st.divider()

# ─────────────────────────────────────────────────────────────────────────────
# Map of total dry-soil days
# ─────────────────────────────────────────────────────────────────────────────
map_col, text_col = st.columns([1.4, 1.0], gap="medium")

with map_col:
    st.subheader("🗺 Where the soil dries out")
    summary = location_summary(obs, {DRY_SOIL_DAYS: "sum"})
    top = driest_locations(obs)
    site_map = build_site_map(
        summary, DRY_SOIL_DAYS,
        caption="Summer dry-soil days, all years",
        highlight=top,
    )
    st_folium(site_map, height=460, width="100%", returned_objects=[])

with text_col:
    st.subheader("📖 About this report")
    st.markdown(
        "Each monitoring point carries seasonal temperature, precipitation and "
        "volumetric soil water content for every year, together with the "
        "ground-cover make-up of the site. The pages in the sidebar follow one "
        "thread each:"
    )
    st.markdown(
        "- **Dry Soil Days**: which points dry out most and how their soil water "
        "moves through the seasons\n"
        "- **Vegetation Cover**: the most vegetated points and what covers them\n"
        "- **Climate Trends**: how summer precipitation responds to warmer summers\n"
        "- **Drought Regions**: drought levels by quadrant of the monument, decade by decade"
    )
    st.markdown("**🔗 Data Sources**")
    for src in DATA_SOURCES.values():
        st.markdown(f"- `{src['file']}` — {src['description']}")

st.divider()

with st.expander("📋 Classification settings", expanded=False):
    c1, c2, c3 = st.columns(3)
    c1.markdown(
        f"**Temperature terciles**  \n{report.t_thresh[0]:.2f} / {report.t_thresh[1]:.2f} °C"
    )
    c2.markdown(
        f"**Precipitation terciles**  \n{report.ppt_thresh[0]:.2f} / {report.ppt_thresh[1]:.2f}"
    )
    c3.markdown(
        f"**Center point**  \n{report.center['long']}, {report.center['lat']}"
    )
    st.caption(f"Drought levels: {', '.join(DROUGHT_LEVELS)} · Regions: {', '.join(REGIONS)}")
