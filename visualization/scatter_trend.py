"""
NABR Climate Report — Temperature vs Precipitation Scatter

Scatter of summer temperature against summer precipitation for two
subjects with each subject's fitted trend line overlaid.
"""

from typing import Dict

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from config.constants import PPT_FIELDS, TEMP_FIELDS, TREND_COLORS


def build_trend_scatter(
    site_rows: pd.DataFrame,
    global_rows: pd.DataFrame,
    site_fit: Dict,
    global_fit: Dict,
) -> go.Figure:
    """
    Build the scatter + trend overlay.

    Parameters
    ----------
    site_rows : DataFrame
        One monitoring point's yearly rows.
    global_rows : DataFrame
        Per-year global averages.
    site_fit, global_fit : dict
        Output of ``fit_trend()``.
    """
    t_col = TEMP_FIELDS["summer"]
    p_col = PPT_FIELDS["summer"]

    fig = go.Figure()
    subjects = [
        (site_rows, site_fit, TREND_COLORS["site"]),
        (global_rows, global_fit, TREND_COLORS["global"]),
    ]
    for rows, fit, color in subjects:
        fig.add_trace(go.Scatter(
            x=rows[t_col],
            y=rows[p_col],
            mode="markers",
            name=fit["label"],
            legendgroup=fit["label"],
            marker=dict(color=color, size=7, opacity=0.7, line=dict(color="white", width=1)),
            hovertemplate="T: %{x:.1f}°C<br>PPT: %{y:.2f}<extra></extra>",
        ))
        if fit["sufficient"]:
            order = np.argsort(fit["x"], kind="mergesort")
            fig.add_trace(go.Scatter(
                x=fit["x"][order],
                y=fit["fitted"][order],
                mode="lines",
                name=f"{fit['label']} trend (slope {fit['slope']:+.2f})",
                legendgroup=fit["label"],
                line=dict(color=color, width=2.5, dash="dash"),
                hoverinfo="skip",
            ))

    fig.update_layout(
        height=460,
        margin=dict(l=20, r=20, t=40, b=20),
        plot_bgcolor="white",
        paper_bgcolor="white",
        font=dict(family="Inter, sans-serif", size=12),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    fig.update_xaxes(title_text="Summer temperature (°C)", gridcolor="#f0f0f0")
    fig.update_yaxes(title_text="Summer precipitation", gridcolor="#f0f0f0")
    return fig
