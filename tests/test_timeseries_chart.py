import logging

import pandas as pd

from core.filter_view import filter_observations
from core.selection_state import Selection
from visualization.timeseries_chart import build_timeseries_chart, unit_label


def test_empty_set_renders_nothing(data):
    filtered = filter_observations(data.observations, Selection("SiteD", "pH"))
    assert build_timeseries_chart(filtered, "SiteD", "pH") is None


def test_title_and_axis_labels(data):
    filtered = filter_observations(data.observations, Selection("SiteA", "pH"))
    fig = build_timeseries_chart(filtered, "SiteA", "pH")
    assert fig.layout.title.text == "pH at SiteA"
    assert fig.layout.yaxis.title.text == "pH (std units)"
    assert fig.layout.xaxis.title.text == "Date"
    assert fig.data[0].mode == "lines+markers"
    assert list(fig.data[0].y) == [7.1, 7.3]


def test_points_are_in_time_order(data):
    filtered = filter_observations(data.observations, Selection("SiteA", "Temperature"))
    shuffled = filtered.iloc[::-1]
    fig = build_timeseries_chart(shuffled, "SiteA", "Temperature")
    xs = pd.to_datetime(pd.Series(fig.data[0].x), utc=True)
    assert xs.is_monotonic_increasing


def test_mixed_units_use_first_row_and_warn(caplog):
    df = pd.DataFrame({"unit": ["mg/L", "ug/L"]})
    with caplog.at_level(logging.WARNING, logger="waterview"):
        assert unit_label(df) == "mg/L"
    assert "Mixed units" in caplog.text


def test_unit_label_of_empty_set():
    assert unit_label(pd.DataFrame({"unit": []})) == ""
