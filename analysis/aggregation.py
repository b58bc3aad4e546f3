"""
NABR Climate Report — Location / Year Aggregation

Groups the observation table by monitoring point (and optionally year
or decade) and summarises named fields with NaN-safe sums and means.

Ranking helpers pick the extreme locations shown on the report pages:
  - driest: total summer dry-soil days, descending
  - most vegetated: mean bare-ground fraction, ascending

Ties keep first-appearance order of the locations in the input.
"""

from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from config.constants import (
    COVER_FIELDS, DECADE_WIDTH, DRY_SOIL_DAYS, FIRST_DECADE,
    LOCATION_KEYS, TOP_N, YEAR_COL,
)
from utils.logger import get_logger

log = get_logger(__name__)

_AGGREGATIONS = ("sum", "mean")


def aggregate(
    df: pd.DataFrame,
    keys: List[str],
    fields: Dict[str, str],
) -> pd.DataFrame:
    """
    Sum or average the requested fields within each group.

    Parameters
    ----------
    df : DataFrame
        Observation table.
    keys : list of str
        Grouping columns, e.g. ``["long", "lat"]``.
    fields : dict
        ``{column: "sum" | "mean"}``.

    Returns
    -------
    DataFrame with one row per group, keys as columns, groups in
    first-appearance order. Rows with a missing key belong to no group.
    """
    bad = {f: how for f, how in fields.items() if how not in _AGGREGATIONS}
    if bad:
        raise ValueError(f"Unsupported aggregation(s): {bad}")

    keyless = int(df[keys].isna().any(axis=1).sum())
    if keyless:
        log.warning(f"Skipping {keyless} rows with a missing {keys} value")

    grouped = df.groupby(keys, sort=False, dropna=True)
    parts = {}
    for field, how in fields.items():
        if how == "sum":
            parts[field] = grouped[field].sum(min_count=0)
        else:
            parts[field] = grouped[field].mean()

    out = pd.DataFrame(parts).reset_index()
    log.debug(f"Aggregated {len(df)} rows into {len(out)} groups by {keys}")
    return out


def location_summary(df: pd.DataFrame, fields: Dict[str, str]) -> pd.DataFrame:
    """One row per (long, lat) across all years."""
    return aggregate(df, LOCATION_KEYS, fields)


def annual_summary(df: pd.DataFrame, fields: Dict[str, str]) -> pd.DataFrame:
    """One row per (long, lat, year)."""
    return aggregate(df, LOCATION_KEYS + [YEAR_COL], fields)


def yearly_mean(df: pd.DataFrame, fields: List[str]) -> pd.DataFrame:
    """Average across all locations for each year, sorted by year."""
    out = aggregate(df, [YEAR_COL], {f: "mean" for f in fields})
    return out.sort_values(YEAR_COL, kind="mergesort").reset_index(drop=True)


# ---------------------------------------------------------------------------
# Decades
# ---------------------------------------------------------------------------
def decade_of(year) -> Optional[int]:
    """Start year of the 10-year bucket holding ``year``; None before 1980."""
    if year is None or pd.isna(year) or year < FIRST_DECADE:
        return None
    return FIRST_DECADE + ((int(year) - FIRST_DECADE) // DECADE_WIDTH) * DECADE_WIDTH


def add_decade(df: pd.DataFrame, col: str = "decade") -> pd.DataFrame:
    out = df.copy()
    out[col] = out[YEAR_COL].map(decade_of).astype("Int64")
    return out


def decade_summary(df: pd.DataFrame, fields: Dict[str, str]) -> pd.DataFrame:
    """Per-decade summary across all locations; pre-1980 rows are dropped."""
    with_decade = add_decade(df).dropna(subset=["decade"])
    out = aggregate(with_decade, ["decade"], fields)
    return out.sort_values("decade", kind="mergesort").reset_index(drop=True)


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------
def top_locations(
    summary: pd.DataFrame,
    metric: str,
    n: int = TOP_N,
    ascending: bool = False,
) -> pd.DataFrame:
    """
    Stable-sort a location summary by ``metric`` and keep the first ``n``.

    Locations with a missing metric sort last. Returns every row when
    fewer than ``n`` locations exist.
    """
    ranked = summary.sort_values(
        metric, ascending=ascending, kind="mergesort", na_position="last",
    )
    top = ranked.head(n).reset_index(drop=True)
    top.insert(0, "rank", np.arange(1, len(top) + 1))
    top["site"] = [location_label(lo, la) for lo, la in zip(top["long"], top["lat"])]
    return top


def driest_locations(df: pd.DataFrame, n: int = TOP_N) -> pd.DataFrame:
    """Locations with the most summer dry-soil days summed over all years."""
    summary = location_summary(df, {DRY_SOIL_DAYS: "sum"})
    return top_locations(summary, DRY_SOIL_DAYS, n=n, ascending=False)


def most_vegetated_locations(df: pd.DataFrame, n: int = TOP_N) -> pd.DataFrame:
    """Locations with the lowest mean bare-ground fraction, with all cover means."""
    summary = location_summary(df, {f: "mean" for f in COVER_FIELDS if f in df.columns})
    return top_locations(summary, "Bare", n=n, ascending=True)


def select_locations(df: pd.DataFrame, locations: pd.DataFrame) -> pd.DataFrame:
    """Rows of ``df`` whose (long, lat) appears in ``locations``."""
    keys = locations[LOCATION_KEYS].drop_duplicates()
    return df.merge(keys, on=LOCATION_KEYS, how="inner")


def location_label(long: float, lat: float) -> str:
    return f"({long:.4f}, {lat:.4f})"
