"""
NABR Climate Report — Observation CSV Loader

Reads the historic and near-term tables and stacks them into one
observation table keyed by (long, lat, year).
- Same schema in both files
- Concatenated without deduplication or a provenance column
- Non-numeric cells coerced to NaN and left for the aggregations to skip
"""

from pathlib import Path
from typing import List, Optional

import pandas as pd

from config.constants import LOCATION_KEYS, YEAR_COL
from config.data_sources import DATA_DIR, DATA_SOURCES
from utils.logger import get_logger

log = get_logger(__name__)

REQUIRED_COLUMNS = LOCATION_KEYS + [YEAR_COL]


class MissingColumnsError(ValueError):
    """Raised when an observation file lacks a key column."""

    def __init__(self, path, missing: List[str]):
        self.path = path
        self.missing = missing
        super().__init__(f"{path}: missing required column(s) {', '.join(missing)}")


def read_observations(path) -> pd.DataFrame:
    """
    Read one observation CSV and coerce its value columns to numbers.

    Parameters
    ----------
    path : str or Path
        CSV file with at least ``long``, ``lat`` and ``year`` columns.

    Returns
    -------
    pandas.DataFrame
    """
    df = pd.read_csv(path)

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise MissingColumnsError(path, missing)

    # Drop the unnamed index column some exports carry
    df = df.loc[:, ~df.columns.str.startswith("Unnamed")].copy()

    for col in df.columns:
        if not pd.api.types.is_numeric_dtype(df[col]):
            df[col] = pd.to_numeric(df[col], errors="coerce")

    df[YEAR_COL] = df[YEAR_COL].astype("Int64")

    log.info(f"Loaded {len(df)} rows from {Path(path).name}")
    return df


class ObservationLoader:
    """Loads the historic and near-term observation tables."""

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR

    def path_for(self, source: str) -> Path:
        return self.data_dir / DATA_SOURCES[source]["file"]

    def load_historic(self) -> pd.DataFrame:
        return read_observations(self.path_for("historic"))

    def load_nearterm(self) -> pd.DataFrame:
        return read_observations(self.path_for("nearterm"))

    def load_all(self) -> pd.DataFrame:
        """Historic rows followed by near-term rows, fresh integer index."""
        return concat_observations(self.load_historic(), self.load_nearterm())


def concat_observations(historic: pd.DataFrame, nearterm: pd.DataFrame) -> pd.DataFrame:
    combined = pd.concat([historic, nearterm], ignore_index=True, sort=False)
    log.debug(
        f"Combined {len(historic)} historic + {len(nearterm)} near-term rows "
        f"into {len(combined)}"
    )
    return combined
