"""
WaterView — Plotly Time-Series Chart

Line + marker chart of one parameter at one site, oldest sample first.
"""

import logging
from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from config.constants import CHART_HEIGHT, CHART_LINE_COLOR, CHART_MARKER_COLOR, TIMESTAMP, UNIT, VALUE

logger = logging.getLogger("waterview")


def unit_label(filtered: pd.DataFrame) -> str:
    """
    Unit of the first row.

    Mixed units within one site/parameter are a data-quality problem the
    dashboard does not resolve; they are logged and the first unit is used.
    """
    if filtered.empty:
        return ""
    units = filtered[UNIT].dropna().unique()
    if len(units) > 1:
        logger.warning("Mixed units %s in filtered set; labelling with the first row's unit", list(units))
    first = filtered[UNIT].iloc[0]
    return "" if pd.isna(first) else str(first)


def build_timeseries_chart(filtered: pd.DataFrame, site: str, parameter: str) -> Optional[go.Figure]:
    """
    Build the time-series figure, or None when there is nothing to plot.

    Parameters
    ----------
    filtered : pd.DataFrame
        Output of `filter_observations`.
    site, parameter : str
        Current selection, used in the title and y-axis label.
    """
    if filtered.empty:
        return None

    df = filtered.sort_values(TIMESTAMP, kind="stable")
    unit = unit_label(df)

    fig = go.Figure(go.Scatter(
        x=df[TIMESTAMP],
        y=df[VALUE],
        mode="lines+markers",
        name=parameter,
        line=dict(color=CHART_LINE_COLOR, width=2),
        marker=dict(color=CHART_MARKER_COLOR, size=7),
        hovertemplate="<b>%{x|%Y-%m-%d %H:%M}</b><br>%{y}<extra></extra>",
    ))

    fig.update_layout(
        title=dict(text=f"{parameter} at {site}", font=dict(size=16)),
        height=CHART_HEIGHT,
        margin=dict(l=20, r=20, t=50, b=20),
        plot_bgcolor="white",
        paper_bgcolor="white",
        font=dict(family="Inter, sans-serif", size=14),
        showlegend=False,
    )
    fig.update_xaxes(title_text="Date", gridcolor="#f0f0f0")
    fig.update_yaxes(title_text=f"{parameter} ({unit})", gridcolor="#f0f0f0")
    return fig
