from pathlib import Path

import folium
import pytest
import streamlit_folium
from streamlit.testing.v1 import AppTest

from core.selection_state import Selection

APP = str(Path(__file__).resolve().parent.parent / "app.py")

GREEN = "Green River at Auburn"
PUYALLUP = "Puyallup River at Puyallup"
NISQUALLY = "Nisqually River at McKenna"
CHAMBERS = "Chambers Creek at Steilacoom"


class MapStub:
    """Stands in for ``st_folium``: returns a scripted click and records highlights."""

    def __init__(self):
        self.clicked = {}
        self.highlights = []

    def click(self, site, count):
        self.clicked = {"last_object_clicked_tooltip": site, "last_object_clicked_count": count}

    def __call__(self, fig, key=None, feature_group_to_add=None, returned_objects=None, **kwargs):
        markers = [
            c for c in feature_group_to_add._children.values() if isinstance(c, folium.CircleMarker)
        ]
        tooltips = [
            next(t for t in m._children.values() if isinstance(t, folium.Tooltip)).text
            for m in markers
        ]
        self.highlights.append(tooltips)
        return dict(self.clicked)


@pytest.fixture
def map_stub(monkeypatch):
    stub = MapStub()
    monkeypatch.setattr(streamlit_folium, "st_folium", stub)
    return stub


@pytest.fixture
def app(map_stub):
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def _selection(at):
    return at.session_state["selection_state"].selection


def _summary(at):
    return at.dataframe[0].value


def test_initial_state(app, map_stub):
    assert _selection(app) == Selection(GREEN, None)
    assert app.selectbox[0].value == GREEN
    assert app.selectbox[1].value is None
    assert _summary(app).to_dict("records") == [{"Message": "No data"}]
    assert map_stub.highlights[-1] == [GREEN]


def test_selectors_drive_selection_and_summary(app, map_stub):
    app.selectbox[1].select("pH").run()
    app.selectbox[0].select(PUYALLUP).run()

    assert _selection(app) == Selection(PUYALLUP, "pH")
    row = _summary(app).iloc[0]
    assert row["Site"] == PUYALLUP
    assert row["Records"] == 12
    assert row["Start"] == "2024-01-15"
    assert row["End"] == "2024-12-15"
    assert map_stub.highlights[-1] == [PUYALLUP]


def test_parameter_missing_at_site_shows_no_data(app):
    app.selectbox[1].select("Dissolved Oxygen").run()
    app.selectbox[0].select(CHAMBERS).run()

    assert _selection(app) == Selection(CHAMBERS, "Dissolved Oxygen")
    assert _summary(app).to_dict("records") == [{"Message": "No data"}]
    assert not app.exception


def test_map_click_updates_site_selector(app, map_stub):
    map_stub.click(NISQUALLY, 1)
    app.run()

    assert _selection(app).selected_site == NISQUALLY
    assert app.selectbox[0].value == NISQUALLY
    assert map_stub.highlights[-1] == [NISQUALLY]


def test_map_and_selector_give_same_result(map_stub):
    via_selector = AppTest.from_file(APP, default_timeout=30)
    via_selector.run()
    via_selector.selectbox[1].select("Temperature").run()
    via_selector.selectbox[0].select(PUYALLUP).run()

    via_map = AppTest.from_file(APP, default_timeout=30)
    via_map.run()
    via_map.selectbox[1].select("Temperature").run()
    map_stub.click(PUYALLUP, 1)
    via_map.run()

    assert _selection(via_map) == _selection(via_selector)
    assert via_map.selectbox[0].value == via_selector.selectbox[0].value
    assert _summary(via_map).equals(_summary(via_selector))


def test_clicking_same_marker_again_after_dropdown_change(app, map_stub):
    map_stub.click(PUYALLUP, 1)
    app.run()
    app.selectbox[0].select(CHAMBERS).run()
    assert _selection(app).selected_site == CHAMBERS

    map_stub.click(PUYALLUP, 2)
    app.run()
    assert _selection(app).selected_site == PUYALLUP
    assert app.selectbox[0].value == PUYALLUP


def test_stale_click_does_not_override_dropdown(app, map_stub):
    map_stub.click(PUYALLUP, 1)
    app.run()
    app.selectbox[0].select(CHAMBERS).run()
    app.run()
    assert _selection(app).selected_site == CHAMBERS


def test_unknown_marker_is_ignored(app, map_stub):
    map_stub.click("Atlantis", 1)
    app.run()

    assert not app.exception
    assert _selection(app).selected_site == GREEN
    assert app.selectbox[0].value == GREEN
    assert "Atlantis" in app.toast[0].value
