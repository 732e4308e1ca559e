"""
WaterView — Main Streamlit Dashboard
=====================================
Water quality time series, summary statistics and site map.

Entry point: streamlit run app.py
"""

import logging

import streamlit as st
from streamlit_folium import st_folium

# ── Internal imports ──────────────────────────────────────────────────────────
from config.constants import PAGE_TITLE
from config.logging_setup import setup_logging
from config.settings import LOG_LEVEL, OBSERVATIONS_CSV, SITES_CSV

from core.exceptions import InvalidSelectionError, LoadError
from core.filter_view import FilterView
from core.selection_state import SITE, SelectionState

from data_fetch.data_loader import load

from analysis.summary_stats import compute_summary

from visualization.site_map import build_highlight_layer, build_site_map, click_token, clicked_site
from visualization.summary_table import build_summary_table
from visualization.timeseries_chart import build_timeseries_chart

setup_logging(LOG_LEVEL)
logger = logging.getLogger("waterview")

SITE_KEY = "site_select"
PARAMETER_KEY = "parameter_select"
STATE_KEY = "selection_state"
LAST_CLICK_KEY = "last_map_click"

# ─────────────────────────────────────────────────────────────────────────────
# Page config
# ─────────────────────────────────────────────────────────────────────────────
st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon="💧",
    layout="wide",
)


# ─────────────────────────────────────────────────────────────────────────────
# Cached data
# ─────────────────────────────────────────────────────────────────────────────
@st.cache_data(show_spinner=False)
def load_dashboard_data(observations_path: str, sites_path: str):
    """Read and join both input tables once per file pair."""
    return load(observations_path, sites_path)


# ─────────────────────────────────────────────────────────────────────────────
# Selection state (one per browser session)
# ─────────────────────────────────────────────────────────────────────────────
def _sync_site_selector(field, selection):
    """Keep the site dropdown showing the selected site, whoever changed it."""
    if field == SITE:
        st.session_state[SITE_KEY] = selection.selected_site


def get_selection_state(data) -> SelectionState:
    if STATE_KEY not in st.session_state:
        state = SelectionState(data.site_names, data.parameters)
        state.subscribe(_sync_site_selector)
        st.session_state[STATE_KEY] = state
        st.session_state[SITE_KEY] = state.selection.selected_site
    return st.session_state[STATE_KEY]


def apply_selection(setter, name) -> bool:
    """Run a selection update; a bad name is reported and otherwise ignored."""
    try:
        return setter(name)
    except InvalidSelectionError as e:
        logger.warning("Ignoring selection event: %s", e)
        st.toast(f"⚠️ {e}")
        return False


def _on_site_change(state: SelectionState):
    if not apply_selection(state.set_site, st.session_state[SITE_KEY]):
        st.session_state[SITE_KEY] = state.selection.selected_site


def _on_parameter_change(state: SelectionState):
    name = st.session_state[PARAMETER_KEY]
    if name is not None:
        apply_selection(state.set_parameter, name)


# ─────────────────────────────────────────────────────────────────────────────
# Load
# ─────────────────────────────────────────────────────────────────────────────
try:
    data = load_dashboard_data(OBSERVATIONS_CSV, SITES_CSV)
except LoadError as e:
    logger.error("Startup aborted: %s", e)
    st.error(f"⚠️ Could not load input data: {e}")
    st.stop()

state = get_selection_state(data)

# ─────────────────────────────────────────────────────────────────────────────
# Layout
# ─────────────────────────────────────────────────────────────────────────────
st.title(PAGE_TITLE)

plot_col, map_col = st.columns(2, gap="medium")

# The map is handled before the dropdowns so a marker click can still
# update the site dropdown's value in this run. st_folium attaches the
# highlight layer to the map it is given, so each run gets a fresh base map.
with map_col:
    map_state = st_folium(
        build_site_map(data),
        key="site_map",
        height=800,
        width="100%",
        feature_group_to_add=build_highlight_layer(data, state.selection.selected_site),
        returned_objects=["last_object_clicked_tooltip", "last_object_clicked_count"],
    )

    clicked = clicked_site(map_state)
    token = click_token(map_state)
    if clicked and token != st.session_state.get(LAST_CLICK_KEY):
        st.session_state[LAST_CLICK_KEY] = token
        if apply_selection(state.set_site, clicked):
            st.rerun()

with plot_col:
    site_col, param_col = st.columns(2)
    with site_col:
        st.selectbox(
            "Select Site:",
            state.site_names,
            key=SITE_KEY,
            on_change=_on_site_change,
            args=(state,),
        )
    with param_col:
        st.selectbox(
            "Select Parameter:",
            state.parameters,
            index=None,
            placeholder="Choose a parameter",
            key=PARAMETER_KEY,
            on_change=_on_parameter_change,
            args=(state,),
        )

    selection = state.selection
    filtered = FilterView(data, state).filtered()

    # ── Time series ──────────────────────────────────────────────────────────
    fig = build_timeseries_chart(filtered, selection.selected_site, selection.selected_parameter)
    if fig is not None:
        st.plotly_chart(fig, width="stretch", config={"displayModeBar": False})

    st.divider()

    # ── Summary statistics ───────────────────────────────────────────────────
    st.subheader("Summary Statistics")
    summary = compute_summary(filtered, data.site_info(selection.selected_site))
    st.dataframe(build_summary_table(summary), hide_index=True)
