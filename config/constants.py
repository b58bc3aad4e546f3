"""
NABR Climate Report — Constants and Classification Parameters

Column groups, the reference center point, tercile cut points and the
colour palette shared by every report page.

Field definitions follow the point-based climate / soil-water dataset
for Natural Bridges National Monument (Southeast Utah Group):
- Seasonal temperature (°C) and precipitation (cm)
- Seasonal volumetric water content, whole soil profile
- Summer dry-soil-day counts
- Ground-cover fractions (%)
"""

# =============================================================================
# Key columns
# =============================================================================
LOCATION_KEYS = ["long", "lat"]
YEAR_COL = "year"

# =============================================================================
# Seasonal fields
# =============================================================================
TEMP_FIELDS = {
    "winter": "T_Winter",
    "spring": "T_Spring",
    "summer": "T_Summer",
    "fall":   "T_Fall",
}

PPT_FIELDS = {
    "winter": "PPT_Winter",
    "spring": "PPT_Spring",
    "summer": "PPT_Summer",
    "fall":   "PPT_Fall",
}

VWC_FIELDS = {
    "Winter": "VWC_Winter_whole",
    "Spring": "VWC_Spring_whole",
    "Summer": "VWC_Summer_whole",
    "Fall":   "VWC_Fall_whole",
}

DRY_SOIL_DAYS = "DrySoilDays_Summer_whole"

# Fractions do not necessarily sum to 100
COVER_FIELDS = ["Bare", "Herb", "Litter", "Shrub", "treecanopy"]

COVER_LABELS = {
    "Bare":       "Bare ground",
    "Herb":       "Herbaceous",
    "Litter":     "Litter",
    "Shrub":      "Shrub",
    "treecanopy": "Tree canopy",
}

# Grouping used by the ground-cover dropdown
COVER_GROUPS = {
    "All cover":  COVER_FIELDS,
    "Vegetation": ["Herb", "Shrub", "treecanopy"],
    "Non-living": ["Bare", "Litter"],
}

# Derived per-row averages used by the drought classification
AVG_TEMP = "avg_temp"
AVG_PPT = "avg_ppt"

# =============================================================================
# Drought classification
# Terciles are computed globally across all rows, NaN excluded
# =============================================================================
TERCILES = (0.33, 0.66)

DROUGHT_LEVELS = ("Low_Arid", "Medium_Arid", "High_Arid")

DROUGHT_COLORS = {
    "Low_Arid":    "#2e86c1",
    "Medium_Arid": "#f5b041",
    "High_Arid":   "#c0392b",
}

# =============================================================================
# Region classification
# Quadrants are relative to the center of the monitoring-point grid
# =============================================================================
CENTER = {"long": -110.0098, "lat": 37.59964}

REGIONS = ("Northeast", "Northwest", "Southeast", "Southwest")

REGION_COLORS = {
    "Northeast": "#16a085",
    "Northwest": "#8e44ad",
    "Southeast": "#d35400",
    "Southwest": "#7f8c8d",
}

# =============================================================================
# Ranking and time buckets
# =============================================================================
TOP_N = 5
FIRST_DECADE = 1980
DECADE_WIDTH = 10

# =============================================================================
# Chart palette
# =============================================================================
SEASON_COLORS = {
    "Winter": "#5dade2",
    "Spring": "#58d68d",
    "Summer": "#f4d03f",
    "Fall":   "#dc7633",
}

COVER_COLORS = {
    "Bare":       "#c8a165",
    "Herb":       "#a9dfbf",
    "Litter":     "#873600",
    "Shrub":      "#52be80",
    "treecanopy": "#1e8449",
}

TREND_COLORS = {
    "site":   "#c0392b",
    "global": "#2c3e50",
}

DRYNESS_SCALE = ["#eaf2f8", "#f9e79f", "#f5b041", "#dc7633", "#922b21"]

# =============================================================================
# Logging (loguru)
# =============================================================================
LOGGING = {
    "level": "INFO",
    "format": "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
    "rotation": "5 MB",
    "retention": "14 days",
    "file_name": "nabr_report.log",
}
