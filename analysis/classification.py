"""
NABR Climate Report — Drought-Level and Region Classification

Labels every observation row with:
  - Drought_Level: Low_Arid / Medium_Arid / High_Arid, from the row's
    winter–summer average temperature and precipitation against global
    terciles
  - Region: Northeast / Northwest / Southeast / Southwest, relative to a
    fixed center coordinate

Rows are classified independently, so one location may carry a
different drought label in different years.

The drought rule falls through to Medium_Arid when temperature and
precipitation are both low or both high.
"""

from collections import OrderedDict
from typing import Dict, Optional, Sequence, Tuple

import pandas as pd

from config.constants import (
    AVG_PPT, AVG_TEMP, CENTER, DROUGHT_LEVELS, FIRST_DECADE,
    PPT_FIELDS, REGIONS, TEMP_FIELDS, TERCILES, YEAR_COL,
)
from analysis.aggregation import decade_of
from utils.logger import get_logger

log = get_logger(__name__)

SEASONAL_INPUTS = [
    TEMP_FIELDS["winter"], TEMP_FIELDS["summer"],
    PPT_FIELDS["winter"], PPT_FIELDS["summer"],
]


def add_seasonal_averages(df: pd.DataFrame) -> pd.DataFrame:
    """Add avg_temp / avg_ppt as the mean of the winter and summer values."""
    out = df.copy()
    out[AVG_TEMP] = (out[TEMP_FIELDS["winter"]] + out[TEMP_FIELDS["summer"]]) / 2
    out[AVG_PPT] = (out[PPT_FIELDS["winter"]] + out[PPT_FIELDS["summer"]]) / 2
    return out


def compute_terciles(values: pd.Series, quantiles: Sequence[float] = TERCILES) -> Tuple[float, float]:
    """Lower and upper tercile cut points, ignoring missing values."""
    clean = pd.Series(values, dtype=float).dropna()
    if clean.empty:
        raise ValueError("Cannot compute terciles of an empty series")
    lo, hi = clean.quantile(list(quantiles)).tolist()
    return float(lo), float(hi)


# ---------------------------------------------------------------------------
# Row rules
# ---------------------------------------------------------------------------
BRANCH_LABELS = {
    "low":      "Low_Arid",
    "medium":   "Medium_Arid",
    "high":     "High_Arid",
    # cold-and-dry or hot-and-wet
    "fallback": "Medium_Arid",
}


def drought_branch(t: float, p: float, t_thresh, ppt_thresh) -> str:
    """Name of the rule branch that decides a row."""
    t33, t66 = t_thresh
    p33, p66 = ppt_thresh
    if t <= t33 and p >= p66:
        return "low"
    elif (t33 < t <= t66) or (p33 < p <= p66):
        return "medium"
    elif t > t66 and p <= p33:
        return "high"
    return "fallback"


def classify_drought(
    t: float,
    p: float,
    t_thresh: Sequence[float],
    ppt_thresh: Sequence[float],
) -> str:
    """
    Drought level for one row.

    Parameters
    ----------
    t, p : float
        Row average temperature and precipitation.
    t_thresh, ppt_thresh : (lower, upper)
        Global tercile cut points.
    """
    return BRANCH_LABELS[drought_branch(t, p, t_thresh, ppt_thresh)]


def classify_region(
    long: float,
    lat: float,
    center: Optional[Dict[str, float]] = None,
) -> str:
    """Quadrant of (long, lat) relative to ``center``; ties go north / east."""
    center = center or CENTER
    east = long >= center["long"]
    north = lat >= center["lat"]
    if east and north:
        return "Northeast"
    if east:
        return "Southeast"
    if north:
        return "Northwest"
    return "Southwest"


# ---------------------------------------------------------------------------
# Table level
# ---------------------------------------------------------------------------
def classify_drought_levels(
    df: pd.DataFrame,
    t_thresh: Optional[Sequence[float]] = None,
    ppt_thresh: Optional[Sequence[float]] = None,
) -> Tuple[pd.DataFrame, Tuple[float, float], Tuple[float, float]]:
    """
    Drop rows missing seasonal inputs and attach Drought_Level.

    Thresholds are computed over the kept rows when not supplied.

    Returns
    -------
    (classified DataFrame, t_thresh, ppt_thresh)
    """
    kept = df.dropna(subset=SEASONAL_INPUTS)
    dropped = len(df) - len(kept)
    if dropped:
        log.info(f"Dropped {dropped} rows with missing seasonal temperature/precipitation")

    kept = add_seasonal_averages(kept)

    if t_thresh is None:
        t_thresh = compute_terciles(kept[AVG_TEMP])
    if ppt_thresh is None:
        ppt_thresh = compute_terciles(kept[AVG_PPT])
    t_thresh = tuple(float(v) for v in t_thresh)
    ppt_thresh = tuple(float(v) for v in ppt_thresh)
    log.info(f"Drought terciles: temperature={t_thresh}, precipitation={ppt_thresh}")

    kept["Drought_Branch"] = [
        drought_branch(t, p, t_thresh, ppt_thresh)
        for t, p in zip(kept[AVG_TEMP], kept[AVG_PPT])
    ]
    kept["Drought_Level"] = kept["Drought_Branch"].map(BRANCH_LABELS)

    n_fallback = int((kept["Drought_Branch"] == "fallback").sum())
    if n_fallback:
        log.debug(f"{n_fallback} rows classified Medium_Arid by the fallback branch")
    return kept, t_thresh, ppt_thresh


def classify_regions(df: pd.DataFrame, center: Optional[Dict[str, float]] = None) -> pd.DataFrame:
    out = df.copy()
    out["Region"] = [
        classify_region(lo, la, center) for lo, la in zip(out["long"], out["lat"])
    ]
    return out


# ---------------------------------------------------------------------------
# Flow diagram input
# ---------------------------------------------------------------------------
def flow_counts(
    df: pd.DataFrame,
    start: Optional[int] = None,
    end: Optional[int] = None,
) -> pd.DataFrame:
    """
    Row counts per (Drought_Level, Region) within an inclusive year window.

    Returns
    -------
    DataFrame with columns Drought_Level, Region, count; zero pairs omitted.
    """
    rows = df
    if start is not None:
        rows = rows[rows[YEAR_COL].ge(start).fillna(False).astype(bool)]
    if end is not None:
        rows = rows[rows[YEAR_COL].le(end).fillna(False).astype(bool)]

    counts = (
        rows.groupby(["Drought_Level", "Region"]).size()
        .reset_index(name="count")
    )
    counts = counts[counts["count"] > 0]

    level_order = {lvl: i for i, lvl in enumerate(DROUGHT_LEVELS)}
    region_order = {reg: i for i, reg in enumerate(REGIONS)}
    counts = counts.assign(
        _l=counts["Drought_Level"].map(level_order),
        _r=counts["Region"].map(region_order),
    ).sort_values(["_l", "_r"]).drop(columns=["_l", "_r"])
    return counts.reset_index(drop=True)


def flow_windows(df: pd.DataFrame, first_decade: int = FIRST_DECADE) -> "OrderedDict[str, Tuple]":
    """All-years window followed by one window per decade present in ``df``."""
    windows = OrderedDict()
    windows["All years"] = (None, None)

    decades = sorted({
        d for d in (decade_of(y) for y in df[YEAR_COL].dropna().unique())
        if d is not None and d >= first_decade
    })
    for d in decades:
        windows[f"{d}s"] = (d, d + 9)
    return windows
