"""
WaterView — Site Overview

Per-site facts shown on the map, computed over the full observation table
regardless of the current selection.
"""

import logging

import numpy as np
import pandas as pd

from config.constants import AQUATIC_LIFE_USE, LATITUDE, LONGITUDE, SITE_NAME, TIMESTAMP
from data_fetch.data_loader import DashboardData

logger = logging.getLogger("waterview")


def last_sample_dates(observations: pd.DataFrame) -> pd.Series:
    """Most recent timestamp per site_name, ignoring missing timestamps."""
    return (
        observations.dropna(subset=[TIMESTAMP])
        .groupby(SITE_NAME)[TIMESTAMP]
        .max()
        .rename("last_date")
    )


def site_markers(data: DashboardData) -> pd.DataFrame:
    """
    One row per distinct site location, with its last sample date.

    Sites whose coordinates are missing or outside valid lat/lon ranges are
    dropped with a warning.
    """
    locs = (
        data.sites[[SITE_NAME, LATITUDE, LONGITUDE, AQUATIC_LIFE_USE]]
        .drop_duplicates(subset=[SITE_NAME, LATITUDE, LONGITUDE])
    )

    lat = locs[LATITUDE].to_numpy(dtype=float)
    lon = locs[LONGITUDE].to_numpy(dtype=float)
    valid = (
        np.isfinite(lat) & np.isfinite(lon)
        & (np.abs(lat) <= 90.0) & (np.abs(lon) <= 180.0)
    )
    if not valid.all():
        logger.warning("Skipping sites without valid coordinates: %s",
                       sorted(locs.loc[~valid, SITE_NAME].astype(str)))
    locs = locs[valid]

    return (
        locs.merge(last_sample_dates(data.observations), left_on=SITE_NAME,
                   right_index=True, how="left")
        .reset_index(drop=True)
    )
