"""
WaterView — Folium Site Map

Renders every monitoring site as a circle marker on a light basemap:
  - Tooltip carries the site name (also used to identify clicks)
  - Popup shows aquatic-life use and the last sample date
  - A separate "selected" feature group holds the highlight marker, so a
    new selection swaps that one layer instead of redrawing the map
"""

import html
import logging
from typing import Dict, Optional, Tuple

import folium
import pandas as pd

from analysis.site_overview import site_markers
from analysis.summary_stats import format_date
from config.constants import (
    AQUATIC_LIFE_USE, LATITUDE, LONGITUDE, MAP_DEFAULT_CENTER, MAP_DEFAULT_ZOOM,
    MAP_TILES, SELECTED_LAYER_NAME, SELECTED_MARKER, SITE_MARKER, SITE_NAME,
)
from data_fetch.data_loader import DashboardData

logger = logging.getLogger("waterview")


def build_site_map(data: DashboardData) -> folium.Map:
    """
    Build the base map with one marker per site.

    The map is static for the lifetime of the session; only the layer from
    `build_highlight_layer` changes.
    """
    markers = site_markers(data)

    m = folium.Map(
        location=MAP_DEFAULT_CENTER,
        zoom_start=MAP_DEFAULT_ZOOM,
        tiles=MAP_TILES,
    )

    for _, row in markers.iterrows():
        folium.CircleMarker(
            location=[row[LATITUDE], row[LONGITUDE]],
            radius=SITE_MARKER["radius"],
            color=SITE_MARKER["color"],
            fill=True,
            fill_color=SITE_MARKER["color"],
            fill_opacity=SITE_MARKER["fill_opacity"],
            stroke=False,
            tooltip=row[SITE_NAME],
            popup=folium.Popup(_popup_html(row), max_width=260),
        ).add_to(m)

    if not markers.empty:
        m.fit_bounds([
            [markers[LATITUDE].min(), markers[LONGITUDE].min()],
            [markers[LATITUDE].max(), markers[LONGITUDE].max()],
        ])

    logger.debug("Site map built with %d markers", len(markers))
    return m


def build_highlight_layer(data: DashboardData, site_name: str) -> folium.FeatureGroup:
    """
    Feature group holding the single highlighted marker for ``site_name``.

    Empty if the site has no usable coordinates.
    """
    group = folium.FeatureGroup(name=SELECTED_LAYER_NAME)
    info = data.site_info(site_name)
    lat, lon = info[LATITUDE], info[LONGITUDE]
    if lat is None or lon is None or abs(lat) > 90 or abs(lon) > 180:
        return group

    folium.CircleMarker(
        location=[lat, lon],
        radius=SELECTED_MARKER["radius"],
        color=SELECTED_MARKER["color"],
        fill=True,
        fill_color=SELECTED_MARKER["color"],
        fill_opacity=SELECTED_MARKER["fill_opacity"],
        stroke=False,
        tooltip=site_name,
    ).add_to(group)
    return group


def clicked_site(map_state: Optional[Dict]) -> Optional[str]:
    """
    Site name of the last clicked marker, from the ``st_folium`` return value.

    Not validated here; `SelectionState.set_site` rejects unknown names.
    """
    tooltip = (map_state or {}).get("last_object_clicked_tooltip")
    if not tooltip:
        return None
    return str(tooltip).strip() or None


def click_token(map_state: Optional[Dict]) -> Tuple[Optional[int], Optional[str]]:
    """
    Identity of the last click: the frontend's running click count plus the
    tooltip. Clicking the same marker twice gives two different tokens.
    """
    state = map_state or {}
    return state.get("last_object_clicked_count"), clicked_site(state)


def _popup_html(row: pd.Series) -> str:
    aquatic_use = row[AQUATIC_LIFE_USE]
    if pd.isna(aquatic_use):
        aquatic_use = "Unknown"
    last_date = row.get("last_date")
    last_txt = format_date(None if pd.isna(last_date) else last_date)
    return (
        f"<b>{html.escape(str(row[SITE_NAME]))}</b><br/>"
        f"Aquatic Use: {html.escape(str(aquatic_use))}<br/>"
        f"Last Sample: {last_txt}"
    )
