import numpy as np
import pandas as pd
import pytest

from analysis.trend_analysis import compare_trends, fit_trend, global_trend, site_trend


def test_recovers_exact_line():
    temps = np.arange(10, dtype=float) + 15.0
    ppts = 2 * temps + 1

    fit = fit_trend(temps, ppts, label="synthetic")

    assert fit["sufficient"]
    assert fit["slope"] == pytest.approx(2.0)
    assert fit["intercept"] == pytest.approx(1.0)
    assert fit["r_squared"] == pytest.approx(1.0)
    assert fit["n"] == 10
    np.testing.assert_allclose(fit["fitted"], ppts)


def test_pairs_with_missing_values_are_dropped():
    temps = [1.0, 2.0, np.nan, 4.0, 5.0]
    ppts = [3.0, 5.0, 100.0, np.nan, 11.0]

    fit = fit_trend(temps, ppts)

    assert fit["n"] == 3
    assert fit["slope"] == pytest.approx(2.0)
    assert fit["intercept"] == pytest.approx(1.0)
    np.testing.assert_allclose(fit["x"], [1.0, 2.0, 5.0])


@pytest.mark.parametrize("temps, ppts", [
    ([], []),
    ([20.0], [3.0]),
    ([20.0, 20.0, 20.0], [1.0, 2.0, 3.0]),
])
def test_insufficient_data(temps, ppts):
    fit = fit_trend(temps, ppts, label="empty")

    assert not fit["sufficient"]
    assert np.isnan(fit["slope"])
    assert len(fit["fitted"]) == 0


def test_site_and_global_trends(observations):
    long, lat = observations[["long", "lat"]].iloc[0]

    site = site_trend(observations, long, lat)
    overall = global_trend(observations)

    assert site["n"] == (observations["long"] == long).sum()
    assert overall["n"] == observations["year"].nunique()
    assert site["label"].startswith("Site")
    assert overall["label"] == "Global average"


def test_site_trend_on_linear_site():
    df = pd.DataFrame({
        "long": [-110.0] * 10,
        "lat": [37.6] * 10,
        "year": range(2000, 2010),
        "T_Summer": np.linspace(20, 29, 10),
    })
    df["PPT_Summer"] = 2 * df["T_Summer"] + 1

    fit = site_trend(df, -110.0, 37.6)
    assert fit["slope"] == pytest.approx(2.0)
    assert fit["intercept"] == pytest.approx(1.0)


def test_compare_trends_names_weaker_subject():
    flat = fit_trend([1.0, 2.0, 3.0], [1.0, 1.5, 2.0], label="Site A")
    steep = fit_trend([1.0, 2.0, 3.0], [1.0, 3.0, 5.0], label="Global average")

    text = compare_trends(flat, steep)
    assert text.startswith("Site A responds more weakly")
    assert compare_trends(steep, flat).startswith("Site A")


def test_compare_trends_without_fit():
    empty = fit_trend([], [], label="x")
    assert "Not enough" in compare_trends(empty, empty)
