"""
NABR Climate Report — Chart Series Helpers

Reshapes summary tables into the per-trace structures plotly expects:
wide-to-long pivots, dropdown visibility vectors and fixed colours.
"""

from typing import Dict, List, Sequence

import pandas as pd


def to_long(
    df: pd.DataFrame,
    id_vars: List[str],
    value_vars: List[str],
    var_name: str = "variable",
    value_name: str = "value",
) -> pd.DataFrame:
    """Wide-to-long pivot; row order follows ``df`` then ``value_vars``."""
    long = df.melt(
        id_vars=id_vars,
        value_vars=value_vars,
        var_name=var_name,
        value_name=value_name,
    )
    return long


def visibility_vectors(group_sizes: Sequence[int]) -> List[List[bool]]:
    """
    One show/hide vector per dropdown option.

    Traces are assumed to be added group by group; option ``i`` shows
    exactly the ``group_sizes[i]`` traces of group ``i``.
    """
    total = sum(group_sizes)
    vectors = []
    offset = 0
    for size in group_sizes:
        vec = [False] * total
        for j in range(offset, offset + size):
            vec[j] = True
        vectors.append(vec)
        offset += size
    return vectors


def dropdown_menu(labels: Sequence[str], group_sizes: Sequence[int], x: float = 0.0, y: float = 1.18) -> Dict:
    """Plotly ``updatemenus`` entry toggling trace groups."""
    buttons = [
        dict(label=label, method="update", args=[{"visible": vis}])
        for label, vis in zip(labels, visibility_vectors(group_sizes))
    ]
    return dict(
        type="dropdown",
        direction="down",
        buttons=buttons,
        active=0,
        x=x, y=y,
        xanchor="left", yanchor="top",
        showactive=True,
    )


def color_map(categories: Sequence[str], palette: Dict[str, str], default: str = "#95a5a6") -> Dict[str, str]:
    return {c: palette.get(c, default) for c in categories}
