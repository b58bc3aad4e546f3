"""
NABR Climate Report — Annotated Table Builder

Single entry point shared by every report page:

    historic + near-term  →  concatenated  →  averages  →  Drought_Level
                                                       →  Region

The inputs are never modified; calling it twice with the same tables
returns equal results.
"""

from typing import Dict, NamedTuple, Optional, Sequence, Tuple

import pandas as pd

from config.constants import CENTER, LOCATION_KEYS, VWC_FIELDS
from data_fetch.csv_loader import concat_observations
from analysis.classification import classify_drought_levels, classify_regions
from utils.logger import get_logger

log = get_logger(__name__)


class AnnotatedTable(NamedTuple):
    observations: pd.DataFrame
    table: pd.DataFrame
    t_thresh: Tuple[float, float]
    ppt_thresh: Tuple[float, float]
    center: Dict[str, float]


def build_annotated_table(
    historic: pd.DataFrame,
    nearterm: pd.DataFrame,
    center: Optional[Dict[str, float]] = None,
    t_thresh: Optional[Sequence[float]] = None,
    ppt_thresh: Optional[Sequence[float]] = None,
) -> AnnotatedTable:
    """
    Concatenate both tables and attach drought and region labels.

    Parameters
    ----------
    historic, nearterm : DataFrame
        Raw observation tables with the same schema.
    center : dict, optional
        ``{"long": ..., "lat": ...}``; defaults to the monitoring-grid center.
    t_thresh, ppt_thresh : (lower, upper), optional
        Fixed tercile cut points; computed from the data when omitted.

    Returns
    -------
    AnnotatedTable(observations, table, t_thresh, ppt_thresh, center)
        ``observations`` is the full concatenation; ``table`` holds the
        classified rows.
    """
    center = dict(center or CENTER)
    combined = concat_observations(historic, nearterm)

    classified, t_thresh, ppt_thresh = classify_drought_levels(combined, t_thresh, ppt_thresh)
    classified = classify_regions(classified, center).reset_index(drop=True)

    log.info(
        f"Annotated {len(classified)} of {len(combined)} rows across "
        f"{classified.groupby(LOCATION_KEYS).ngroups} locations"
    )
    return AnnotatedTable(combined, classified, t_thresh, ppt_thresh, center)


def pick_focus_site(table: pd.DataFrame) -> Tuple[float, float]:
    """
    Location whose rows are most often High_Arid while staying wettest.

    Ranked by High_Arid share, then mean summer soil water content, both
    descending; remaining ties keep first-appearance order.
    """
    vwc = VWC_FIELDS["Summer"]
    scored = (
        table.assign(_high=(table["Drought_Level"] == "High_Arid").astype(float))
        .groupby(LOCATION_KEYS, sort=False)
        .agg(high_share=("_high", "mean"), vwc=(vwc, "mean"))
        .reset_index()
    )
    best = scored.sort_values(
        ["high_share", "vwc"], ascending=False, kind="mergesort", na_position="last",
    ).iloc[0]
    return float(best["long"]), float(best["lat"])
