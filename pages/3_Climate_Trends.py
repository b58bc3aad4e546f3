"""
NABR Climate Report — Climate Trends

Summer precipitation against summer temperature for the point that is
most often High_Arid yet wettest, compared with the monument average.
"""

import streamlit as st

from config.constants import LOCATION_KEYS, PPT_FIELDS, TEMP_FIELDS, VWC_FIELDS
from analysis.aggregation import location_label, yearly_mean
from analysis.pipeline import pick_focus_site
from analysis.trend_analysis import compare_trends, global_trend, site_trend
from visualization.scatter_trend import build_trend_scatter
from report_data import load_or_stop, start_page

start_page("Climate Trends", "🌡")

st.title("🌡 Climate Trends")
st.caption("Ordinary least-squares fit of summer precipitation on summer temperature")

report = load_or_stop()
table, obs = report.table, report.observations

long, lat = pick_focus_site(table)
site_rows = obs[(obs[LOCATION_KEYS[0]] == long) & (obs[LOCATION_KEYS[1]] == lat)]
global_rows = yearly_mean(obs, [TEMP_FIELDS["summer"], PPT_FIELDS["summer"]])

site_fit = site_trend(obs, long, lat)
global_fit = global_trend(obs)

st.plotly_chart(build_trend_scatter(site_rows, global_rows, site_fit, global_fit), width="stretch")

c1, c2, c3 = st.columns(3)
c1.metric("Focus point", location_label(long, lat))
c2.metric("Site slope", f"{site_fit['slope']:+.3f}")
c3.metric("Global slope", f"{global_fit['slope']:+.3f}")

st.markdown(f"""
<div class="note-card">
  <h3>Reading the slopes</h3>
  {compare_trends(site_fit, global_fit)}
  The focus point is the one most often classified High_Arid while holding
  a mean summer soil water content of
  {site_rows[VWC_FIELDS['Summer']].mean():.3f}. A flatter line there means
  warmer summers bring little change in rainfall.
</div>
""", unsafe_allow_html=True)
