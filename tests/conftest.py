import numpy as np
import pandas as pd
import pytest

SITES = [
    (-110.0200, 37.6100),
    (-110.0000, 37.6050),
    (-110.0150, 37.5900),
    (-109.9950, 37.5850),
    (-110.0098, 37.59964),
    (-110.0300, 37.6200),
]


def make_observations(years, seed=0):
    rng = np.random.default_rng(seed)
    rows = []
    for i, (lo, la) in enumerate(SITES):
        for year in years:
            rows.append({
                "long": lo,
                "lat": la,
                "year": year,
                "T_Winter": rng.normal(1.0 + i * 0.3, 1.0),
                "T_Spring": rng.normal(11.0, 1.0),
                "T_Summer": rng.normal(23.0 + i * 0.2, 1.0),
                "T_Fall": rng.normal(12.0, 1.0),
                "PPT_Winter": abs(rng.normal(6.0, 2.0)),
                "PPT_Summer": abs(rng.normal(7.0 - i * 0.4, 2.0)),
                "VWC_Winter_whole": rng.uniform(0.10, 0.20),
                "VWC_Spring_whole": rng.uniform(0.08, 0.18),
                "VWC_Summer_whole": rng.uniform(0.03, 0.10),
                "VWC_Fall_whole": rng.uniform(0.05, 0.12),
                "DrySoilDays_Summer_whole": float(rng.integers(10, 90)),
                "Bare": 40.0 - i * 5,
                "Herb": 10.0 + i,
                "Litter": 8.0,
                "Shrub": 15.0 + i,
                "treecanopy": 5.0 + i * 2,
            })
    return pd.DataFrame(rows)


@pytest.fixture
def historic():
    return make_observations(range(1985, 2020), seed=1)


@pytest.fixture
def nearterm():
    return make_observations(range(2020, 2025), seed=2)


@pytest.fixture
def observations(historic, nearterm):
    return pd.concat([historic, nearterm], ignore_index=True)


@pytest.fixture
def data_dir(tmp_path, historic, nearterm):
    historic.to_csv(tmp_path / "NABR_historic.csv", index=False)
    nearterm.to_csv(tmp_path / "nearterm_data_2020-2024.csv", index=False)
    return tmp_path
