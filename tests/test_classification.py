import itertools

import numpy as np
import pandas as pd
import pytest

from config.constants import CENTER, DROUGHT_LEVELS, REGIONS
from analysis.classification import (
    add_seasonal_averages, classify_drought, classify_drought_levels,
    classify_region, classify_regions, compute_terciles, drought_branch,
    flow_counts, flow_windows,
)

T_THRESH = (15.0, 25.0)
P_THRESH = (10.0, 20.0)


def test_example_row_is_medium_arid():
    df = pd.DataFrame({
        "long": [-110.0, -110.0],
        "lat": [37.6, 37.6],
        "year": [2001, 2002],
        "T_Summer": [30.0, 30.0],
        "T_Winter": [10.0, 10.0],
        "PPT_Summer": [5.0, 5.0],
        "PPT_Winter": [5.0, 5.0],
    })
    out, t_thresh, p_thresh = classify_drought_levels(df, T_THRESH, P_THRESH)

    assert list(out["avg_temp"]) == [20.0, 20.0]
    assert list(out["avg_ppt"]) == [5.0, 5.0]
    assert list(out["Drought_Level"]) == ["Medium_Arid", "Medium_Arid"]
    assert t_thresh == T_THRESH
    assert p_thresh == P_THRESH


@pytest.mark.parametrize("t, p, expected, branch", [
    (10.0, 25.0, "Low_Arid", "low"),
    (15.0, 20.0, "Low_Arid", "low"),
    (20.0, 5.0, "Medium_Arid", "medium"),
    (10.0, 15.0, "Medium_Arid", "medium"),
    (25.0, 10.1, "Medium_Arid", "medium"),
    (30.0, 5.0, "High_Arid", "high"),
    (25.1, 10.0, "High_Arid", "high"),
    (10.0, 5.0, "Medium_Arid", "fallback"),
    (30.0, 25.0, "Medium_Arid", "fallback"),
])
def test_drought_rule_table(t, p, expected, branch):
    assert classify_drought(t, p, T_THRESH, P_THRESH) == expected
    assert drought_branch(t, p, T_THRESH, P_THRESH) == branch


def test_every_grid_point_falls_in_one_branch():
    values_t = [10.0, 15.0, 20.0, 25.0, 30.0]
    values_p = [5.0, 10.0, 15.0, 20.0, 25.0]
    branches = {
        drought_branch(t, p, T_THRESH, P_THRESH)
        for t, p in itertools.product(values_t, values_p)
    }
    assert branches == {"low", "medium", "high", "fallback"}


def test_center_point_is_northeast():
    assert classify_region(-110.0098, 37.59964) == "Northeast"
    assert classify_region(CENTER["long"], CENTER["lat"], CENTER) == "Northeast"


@pytest.mark.parametrize("long, lat, expected", [
    (-110.0, 37.7, "Northeast"),
    (-110.0, 37.5, "Southeast"),
    (-110.0098, 37.5, "Southeast"),
    (-110.1, 37.7, "Northwest"),
    (-110.1, 37.59964, "Northwest"),
    (-110.1, 37.5, "Southwest"),
])
def test_region_quadrants(long, lat, expected):
    assert classify_region(long, lat) == expected


def test_region_custom_center():
    assert classify_region(0.0, 0.0, {"long": 1.0, "lat": -1.0}) == "Northwest"


def test_terciles_ignore_missing_and_are_ordered():
    values = pd.Series([np.nan, 1.0, 2.0, 3.0, np.nan, 4.0, 5.0, 6.0])
    lo, hi = compute_terciles(values)

    assert lo <= hi
    assert lo == pytest.approx(pd.Series([1.0, 2, 3, 4, 5, 6]).quantile(0.33))
    assert hi == pytest.approx(pd.Series([1.0, 2, 3, 4, 5, 6]).quantile(0.66))


def test_terciles_of_empty_series_raise():
    with pytest.raises(ValueError):
        compute_terciles(pd.Series([np.nan, np.nan]))


def test_all_rows_receive_valid_labels(observations):
    out, t_thresh, p_thresh = classify_drought_levels(observations)
    out = classify_regions(out)

    assert t_thresh[0] <= t_thresh[1]
    assert p_thresh[0] <= p_thresh[1]
    assert len(out) == len(observations)
    assert out["Drought_Level"].notna().all()
    assert out["Region"].notna().all()
    assert set(out["Drought_Level"]) <= set(DROUGHT_LEVELS)
    assert set(out["Region"]) <= set(REGIONS)


def test_rows_missing_inputs_are_dropped(observations):
    df = observations.copy()
    df.loc[0, "T_Winter"] = np.nan
    df.loc[1, "PPT_Summer"] = np.nan

    out, _, _ = classify_drought_levels(df)
    assert len(out) == len(df) - 2


def test_labels_vary_by_year_for_one_location():
    df = pd.DataFrame({
        "long": [-110.0] * 3,
        "lat": [37.6] * 3,
        "year": [2001, 2002, 2003],
        "T_Winter": [0.0, 10.0, 20.0],
        "T_Summer": [10.0, 20.0, 40.0],
        "PPT_Winter": [30.0, 10.0, 0.0],
        "PPT_Summer": [30.0, 10.0, 2.0],
    })
    out, _, _ = classify_drought_levels(df, T_THRESH, P_THRESH)
    assert list(out["Drought_Level"]) == ["Low_Arid", "Medium_Arid", "High_Arid"]


def test_seasonal_averages_do_not_mutate_input(observations):
    before = observations.copy()
    add_seasonal_averages(observations)
    pd.testing.assert_frame_equal(observations, before)


def _labelled():
    return pd.DataFrame({
        "year": [1985, 1986, 1995, 2021, 2022],
        "Drought_Level": ["High_Arid", "High_Arid", "Low_Arid", "High_Arid", "Medium_Arid"],
        "Region": ["Northeast", "Northeast", "Southwest", "Northwest", "Northeast"],
    })


def test_flow_counts_all_years():
    counts = flow_counts(_labelled())

    assert counts["count"].sum() == 5
    assert (counts["count"] > 0).all()
    assert list(counts["Drought_Level"]) == ["Low_Arid", "Medium_Arid", "High_Arid", "High_Arid"]
    row = counts[(counts["Drought_Level"] == "High_Arid") & (counts["Region"] == "Northeast")]
    assert row["count"].iloc[0] == 2


def test_flow_counts_window_is_inclusive():
    counts = flow_counts(_labelled(), 1980, 1989)
    assert counts.to_dict("records") == [
        {"Drought_Level": "High_Arid", "Region": "Northeast", "count": 2},
    ]


def test_flow_counts_empty_window():
    assert flow_counts(_labelled(), 2000, 2009).empty


def test_flow_windows_cover_present_decades():
    windows = flow_windows(_labelled())
    assert list(windows) == ["All years", "1980s", "1990s", "2020s"]
    assert windows["All years"] == (None, None)
    assert windows["2020s"] == (2020, 2029)
