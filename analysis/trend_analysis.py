"""
NABR Climate Report — Summer Temperature / Precipitation Trend Lines

Fits an ordinary-least-squares line of summer precipitation on summer
temperature for one subject at a time:
  - a single monitoring point (all of its years)
  - the global per-year average across all points

The slopes are compared in the report narrative: a smaller slope means a
weaker precipitation response to warming.
"""

from typing import Dict, Iterable

import numpy as np
import pandas as pd
from scipy import stats

from config.constants import LOCATION_KEYS, PPT_FIELDS, TEMP_FIELDS, YEAR_COL
from analysis.aggregation import location_label, yearly_mean
from utils.logger import get_logger

log = get_logger(__name__)

T_COL = TEMP_FIELDS["summer"]
P_COL = PPT_FIELDS["summer"]


def fit_trend(temps: Iterable[float], ppts: Iterable[float], label: str = "") -> Dict:
    """
    Fit ``ppt = slope * temp + intercept`` over pairs with both values present.

    Parameters
    ----------
    temps, ppts : array-like
        Paired summer temperature and precipitation values.
    label : str
        Subject name carried through to charts.

    Returns
    -------
    dict with keys: label, slope, intercept, r_squared, p_value, n,
                    x, fitted, sufficient
    """
    x = np.asarray(list(temps), dtype=float)
    y = np.asarray(list(ppts), dtype=float)
    mask = ~(np.isnan(x) | np.isnan(y))
    x, y = x[mask], y[mask]

    if len(x) < 2 or np.ptp(x) == 0:
        log.warning(f"Trend '{label}': {len(x)} usable points, cannot fit a line")
        return _no_data_result(label, len(x))

    result = stats.linregress(x, y)
    slope = float(result.slope)
    intercept = float(result.intercept)

    log.debug(f"Trend '{label}': slope={slope:.4f} intercept={intercept:.4f} n={len(x)}")

    return {
        "label": label,
        "slope": slope,
        "intercept": intercept,
        "r_squared": float(result.rvalue ** 2),
        "p_value": float(result.pvalue),
        "n": int(len(x)),
        "x": x,
        "fitted": slope * x + intercept,
        "sufficient": True,
    }


def site_trend(df: pd.DataFrame, long: float, lat: float) -> Dict:
    """Trend over every year of one monitoring point."""
    rows = df[(df[LOCATION_KEYS[0]] == long) & (df[LOCATION_KEYS[1]] == lat)]
    rows = rows.sort_values(YEAR_COL, kind="mergesort")
    return fit_trend(rows[T_COL], rows[P_COL], label=f"Site {location_label(long, lat)}")


def global_trend(df: pd.DataFrame) -> Dict:
    """Trend over the per-year average of all monitoring points."""
    annual = yearly_mean(df, [T_COL, P_COL])
    return fit_trend(annual[T_COL], annual[P_COL], label="Global average")


def compare_trends(a: Dict, b: Dict) -> str:
    """One-sentence comparison of two fitted slopes for the report text."""
    if not (a["sufficient"] and b["sufficient"]):
        return "Not enough paired observations to compare precipitation responses."

    weaker, stronger = (a, b) if abs(a["slope"]) < abs(b["slope"]) else (b, a)
    return (
        f"{weaker['label']} responds more weakly to warming "
        f"({weaker['slope']:+.2f} per °C) than {stronger['label']} "
        f"({stronger['slope']:+.2f} per °C)."
    )


def _no_data_result(label: str, n: int) -> Dict:
    return {
        "label": label,
        "slope": float("nan"),
        "intercept": float("nan"),
        "r_squared": float("nan"),
        "p_value": 1.0,
        "n": int(n),
        "x": np.array([]),
        "fitted": np.array([]),
        "sufficient": False,
    }
