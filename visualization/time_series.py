"""
NABR Climate Report — Plotly Seasonal Soil-Water Timeline

Multi-series line chart with:
  - One line per monitoring point for each season's soil water content
  - Dropdown toggling which season is shown
  - Range selector buttons and a range slider on the year axis
"""

from typing import Dict, List, Optional

import pandas as pd
import plotly.graph_objects as go

from config.constants import SEASON_COLORS, VWC_FIELDS, YEAR_COL
from analysis.aggregation import location_label
from visualization.series import dropdown_menu

LINE_DASHES = ["solid", "dash", "dot", "dashdot", "longdash", "longdashdot"]


def build_seasonal_timeline(
    annual: pd.DataFrame,
    seasons: Optional[Dict[str, str]] = None,
    title: str = "Seasonal soil water content",
) -> go.Figure:
    """
    Build the seasonal VWC timeline.

    Parameters
    ----------
    annual : DataFrame
        One row per (long, lat, year) with the VWC columns.
    seasons : dict
        ``{"Winter": "VWC_Winter_whole", ...}``; first entry is shown initially.

    Returns
    -------
    plotly.graph_objects.Figure
    """
    seasons = seasons or VWC_FIELDS
    sites = annual[["long", "lat"]].drop_duplicates().values.tolist()

    fig = go.Figure()
    group_sizes: List[int] = []

    for s_idx, (season, col) in enumerate(seasons.items()):
        for i, (lo, la) in enumerate(sites):
            rows = annual[(annual["long"] == lo) & (annual["lat"] == la)]
            rows = rows.sort_values(YEAR_COL, kind="mergesort")
            fig.add_trace(go.Scatter(
                x=_year_axis(rows[YEAR_COL]),
                y=rows[col],
                mode="lines+markers",
                name=location_label(lo, la),
                legendgroup=location_label(lo, la),
                line=dict(color=SEASON_COLORS.get(season, "#3498db"), width=2,
                          dash=LINE_DASHES[i % len(LINE_DASHES)]),
                marker=dict(size=4),
                visible=(s_idx == 0),
                hovertemplate=f"<b>%{{x|%Y}}</b><br>{season} VWC: %{{y:.3f}}<extra></extra>",
            ))
        group_sizes.append(len(sites))

    fig.update_layout(
        title=dict(text=title, font=dict(size=14), x=0),
        updatemenus=[dropdown_menu(list(seasons), group_sizes)],
        height=460,
        margin=dict(l=20, r=20, t=80, b=20),
        plot_bgcolor="white",
        paper_bgcolor="white",
        font=dict(family="Inter, sans-serif", size=12),
        legend=dict(orientation="h", yanchor="bottom", y=-0.45, xanchor="left", x=0),
        hovermode="x unified",
    )
    fig.update_xaxes(
        gridcolor="#f0f0f0",
        rangeselector=dict(buttons=[
            dict(count=10, label="10y", step="year", stepmode="backward"),
            dict(count=20, label="20y", step="year", stepmode="backward"),
            dict(step="all", label="All"),
        ]),
        rangeslider=dict(visible=True),
        type="date",
    )
    fig.update_yaxes(title_text="VWC (m³/m³)", gridcolor="#f0f0f0")
    return fig


def _year_axis(years: pd.Series) -> pd.Series:
    return pd.to_datetime(years.astype(int).astype(str), format="%Y")
