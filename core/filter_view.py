"""
WaterView — Filter View

Derives the observations matching the current selection. Nothing is
cached: every read recomputes against the latest selection.
"""

import pandas as pd

from config.constants import PARAMETER, SITE_NAME, TIMESTAMP
from core.selection_state import Selection, SelectionState
from data_fetch.data_loader import DashboardData


def filter_observations(observations: pd.DataFrame, selection: Selection) -> pd.DataFrame:
    """
    Rows of ``observations`` for the selected site and parameter, oldest first.

    An unset parameter yields an empty frame with the same columns.
    """
    if selection.selected_parameter is None:
        return observations.iloc[0:0].copy()
    mask = (
        (observations[SITE_NAME] == selection.selected_site)
        & (observations[PARAMETER] == selection.selected_parameter)
    )
    return observations[mask].sort_values(TIMESTAMP, kind="stable").reset_index(drop=True)


class FilterView:
    """Binds the loaded data to a selection state."""

    def __init__(self, data: DashboardData, state: SelectionState):
        self.data = data
        self.state = state

    def filtered(self) -> pd.DataFrame:
        return filter_observations(self.data.observations, self.state.selection)
