"""
NABR Climate Report — Data Source Registry

Two point-based tables share one schema and are concatenated row-wise:
1. Historic — modelled observations for the historical record
2. Near-term — projected observations for 2020–2024
"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DATA_DIR = PROJECT_ROOT / "data"

DATA_SOURCES = {
    "historic": {
        "name": "Historic observations",
        "file": "NABR_historic.csv",
        "description": "Seasonal climate, soil-water and ground-cover values "
                       "per monitoring point and year over the historical record.",
    },
    "nearterm": {
        "name": "Near-term projections",
        "file": "nearterm_data_2020-2024.csv",
        "description": "Projected values for the same monitoring points, "
                       "2020 through 2024.",
    },
}

PARK = {
    "name": "Natural Bridges National Monument",
    "code": "NABR",
    "group": "Southeast Utah Group",
    "lat": 37.60,
    "lon": -110.01,
    "zoom": 13,
}
