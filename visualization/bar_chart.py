"""
NABR Climate Report — Ground Cover and Decade Bar Charts

Grouped bar chart of ground-cover fractions for the ranked sites, with a
dropdown choosing the cover group, and a per-decade bar of a single
metric.
"""

from typing import Dict, List, Optional

import pandas as pd
import plotly.graph_objects as go

from config.constants import COVER_COLORS, COVER_GROUPS, COVER_LABELS
from visualization.series import color_map, dropdown_menu, to_long


def build_cover_bar(
    top_sites: pd.DataFrame,
    groups: Optional[Dict[str, List[str]]] = None,
) -> go.Figure:
    """
    Grouped bars: one bar group per site, one bar per cover fraction.

    Parameters
    ----------
    top_sites : DataFrame
        Output of ``most_vegetated_locations()``: ``site`` plus cover means.
    groups : dict
        ``{"Dropdown label": [cover columns]}``; first entry shown initially.
    """
    groups = groups or COVER_GROUPS
    present = [c for c in COVER_COLORS if c in top_sites.columns]
    long = to_long(top_sites, ["site"], present, var_name="cover", value_name="pct")
    colors = color_map(present, COVER_COLORS)

    fig = go.Figure()
    group_sizes = []
    for g_idx, (label, covers) in enumerate(groups.items()):
        covers = [c for c in covers if c in present]
        for cover in covers:
            part = long[long["cover"] == cover]
            fig.add_trace(go.Bar(
                x=part["site"],
                y=part["pct"],
                name=COVER_LABELS.get(cover, cover),
                marker_color=colors[cover],
                visible=(g_idx == 0),
                text=[f"{v:.1f}" if pd.notna(v) else "" for v in part["pct"]],
                textposition="outside",
                hovertemplate="<b>%{x}</b><br>%{fullData.name}: %{y:.1f}%<extra></extra>",
            ))
        group_sizes.append(len(covers))

    fig.update_layout(
        barmode="group",
        updatemenus=[dropdown_menu(list(groups), group_sizes)],
        xaxis=dict(title="", categoryorder="array", categoryarray=list(top_sites["site"])),
        yaxis=dict(title="Mean cover (%)", gridcolor="#f5f5f5"),
        height=420,
        margin=dict(l=10, r=10, t=70, b=30),
        paper_bgcolor="white",
        plot_bgcolor="white",
        font=dict(family="Inter, sans-serif", size=12),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    return fig


def build_decade_bar(decades: pd.DataFrame, metric: str, title: str = "", color: str = "#dc7633") -> go.Figure:
    """
    One bar per decade.

    Parameters
    ----------
    decades : DataFrame
        Output of ``decade_summary()`` with ``decade`` and ``metric``.
    """
    labels = [f"{int(d)}s" for d in decades["decade"]]
    values = decades[metric].tolist()

    fig = go.Figure(go.Bar(
        x=labels,
        y=values,
        marker=dict(color=color, line=dict(color="white", width=1)),
        text=[f"{v:.1f}" if pd.notna(v) else "" for v in values],
        textposition="outside",
        hovertemplate="<b>%{x}</b>: %{y:.2f}<extra></extra>",
    ))
    fig.update_layout(
        title=dict(text=title, font=dict(size=12), x=0),
        yaxis=dict(title=metric, gridcolor="#f5f5f5"),
        xaxis=dict(title=""),
        height=300,
        margin=dict(l=10, r=10, t=45, b=20),
        paper_bgcolor="white",
        plot_bgcolor="white",
        font=dict(family="Inter, sans-serif", size=11),
        showlegend=False,
    )
    return fig
