"""
NABR Climate Report — Folium Monitoring-Point Map

Renders an interactive Leaflet map with:
  - Satellite and street base layers with a layer control
  - One circle marker per monitoring point, coloured by a summary metric
  - Colorbar legend
  - Highlight ring around the ranked top sites
"""

from typing import Optional

import branca.colormap as cm
import folium
import pandas as pd

from config.constants import DRYNESS_SCALE
from config.data_sources import PARK
from analysis.aggregation import location_label


def build_site_map(
    summary: pd.DataFrame,
    metric: str,
    caption: str = "",
    highlight: Optional[pd.DataFrame] = None,
    reverse_scale: bool = False,
    zoom: int = PARK["zoom"],
) -> folium.Map:
    """
    Build a Folium map of location aggregates.

    Parameters
    ----------
    summary : DataFrame
        One row per location with ``long``, ``lat`` and ``metric``.
    metric : str
        Column that drives marker colour.
    caption : str
        Legend caption.
    highlight : DataFrame, optional
        Ranked locations (``long``, ``lat``, ``rank``) to ring.
    reverse_scale : bool
        Reverse the palette so that low values read as "hot".
    """
    if summary.empty:
        centre = [PARK["lat"], PARK["lon"]]
    else:
        centre = [float(summary["lat"].mean()), float(summary["long"].mean())]

    m = folium.Map(location=centre, zoom_start=zoom, tiles=None)

    # ------------------------------------------------------------------
    # Base layers
    # ------------------------------------------------------------------
    folium.TileLayer(
        tiles="https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
        attr="Esri, Maxar, Earthstar Geographics",
        name="🛰 Satellite",
        overlay=False,
        control=True,
    ).add_to(m)
    folium.TileLayer(
        tiles="OpenStreetMap",
        name="🗺 Street Map",
        overlay=False,
        control=True,
    ).add_to(m)

    values = summary[metric].dropna()
    vmin = float(values.min()) if not values.empty else 0.0
    vmax = float(values.max()) if not values.empty else 1.0
    if vmax <= vmin:
        vmax = vmin + 1.0

    palette = DRYNESS_SCALE[::-1] if reverse_scale else DRYNESS_SCALE
    colormap = cm.LinearColormap(colors=palette, vmin=vmin, vmax=vmax, caption=caption or metric)
    colormap.add_to(m)

    # ------------------------------------------------------------------
    # Monitoring points
    # ------------------------------------------------------------------
    points = folium.FeatureGroup(name="📍 Monitoring points")
    for _, row in summary.iterrows():
        value = row[metric]
        color = colormap(value) if pd.notna(value) else "#bdc3c7"
        label = location_label(row["long"], row["lat"])
        value_txt = f"{value:,.2f}" if pd.notna(value) else "n/a"
        folium.CircleMarker(
            location=[row["lat"], row["long"]],
            radius=7,
            color="white",
            weight=1,
            fill=True,
            fill_color=color,
            fill_opacity=0.85,
            tooltip=f"{label}: {value_txt}",
        ).add_to(points)
    points.add_to(m)

    # ------------------------------------------------------------------
    # Ranked sites
    # ------------------------------------------------------------------
    if highlight is not None and not highlight.empty:
        ranked = folium.FeatureGroup(name="⭐ Top sites")
        for _, row in highlight.iterrows():
            folium.CircleMarker(
                location=[row["lat"], row["long"]],
                radius=13,
                color="#17202a",
                weight=2,
                fill=False,
                dash_array="4 4",
                tooltip=f"#{int(row['rank'])} {location_label(row['long'], row['lat'])}",
            ).add_to(ranked)
        ranked.add_to(m)

    folium.LayerControl(collapsed=False).add_to(m)
    return m
