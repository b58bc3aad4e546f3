"""
NABR Climate Report — Drought → Region Sankey

Nodes are the distinct drought levels and regions present in the counts;
each non-zero (Drought_Level, Region) count is one weighted link.
"""

import pandas as pd
import plotly.graph_objects as go

from config.constants import DROUGHT_COLORS, DROUGHT_LEVELS, REGION_COLORS, REGIONS


def sankey_nodes_links(counts: pd.DataFrame):
    """
    Node labels and link index lists for a flow-count table.

    Returns
    -------
    (labels, sources, targets, values)
    """
    counts = counts[counts["count"] > 0]
    levels = [lvl for lvl in DROUGHT_LEVELS if lvl in set(counts["Drought_Level"])]
    regions = [reg for reg in REGIONS if reg in set(counts["Region"])]
    labels = levels + regions
    index = {label: i for i, label in enumerate(labels)}

    sources = [index[lvl] for lvl in counts["Drought_Level"]]
    targets = [index[reg] for reg in counts["Region"]]
    values = [int(v) for v in counts["count"]]
    return labels, sources, targets, values


def build_flow_sankey(counts: pd.DataFrame, title: str = "") -> go.Figure:
    labels, sources, targets, values = sankey_nodes_links(counts)
    node_colors = [DROUGHT_COLORS.get(lab) or REGION_COLORS.get(lab, "#95a5a6") for lab in labels]
    link_colors = [_fade(node_colors[s]) for s in sources]

    fig = go.Figure(go.Sankey(
        arrangement="snap",
        node=dict(
            label=[lab.replace("_", " ") for lab in labels],
            color=node_colors,
            pad=18,
            thickness=18,
            line=dict(color="white", width=0.5),
        ),
        link=dict(
            source=sources,
            target=targets,
            value=values,
            color=link_colors,
            hovertemplate="%{source.label} → %{target.label}: %{value} rows<extra></extra>",
        ),
    ))
    fig.update_layout(
        title=dict(text=title, font=dict(size=12), x=0),
        height=420,
        margin=dict(l=10, r=10, t=40, b=10),
        paper_bgcolor="white",
        font=dict(family="Inter, sans-serif", size=12),
    )
    return fig


def _fade(hex_color: str, alpha: float = 0.35) -> str:
    h = hex_color.lstrip("#")
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    return f"rgba({r},{g},{b},{alpha})"
