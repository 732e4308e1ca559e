"""
WaterView — Data Loader

Reads the two static input tables once at startup:
  - observations : one row per measurement (site, parameter, value, unit, time)
  - sites        : one row per monitoring location (coordinates, aquatic use)

and left-joins site metadata onto every observation.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pandas as pd

from config.constants import (
    AQUATIC_LIFE_USE, COLUMN_ALIASES, LATITUDE, LONGITUDE, OBSERVATION_COLUMNS,
    PARAMETER, SITE_COLUMNS, SITE_NAME, TIMESTAMP, UNIT, VALUE,
)
from core.exceptions import LoadError, MissingColumnsError

logger = logging.getLogger("waterview")


@dataclass(frozen=True, eq=False)
class DashboardData:
    """
    In-memory tables shared by every view. Treated as read-only after load.

    Attributes
    ----------
    observations : pd.DataFrame
        Observations enriched with latitude, longitude and aquatic_life_use.
    sites : pd.DataFrame
        Site metadata, one row per site_name.
    """

    observations: pd.DataFrame
    sites: pd.DataFrame
    site_names: List[str] = field(init=False)
    parameters: List[str] = field(init=False)

    def __post_init__(self):
        names = list(self.sites[SITE_NAME].dropna().unique())
        for name in self.observations[SITE_NAME].dropna().unique():
            if name not in names:
                names.append(name)
        object.__setattr__(self, "site_names", names)
        object.__setattr__(
            self, "parameters", list(self.observations[PARAMETER].dropna().unique())
        )

    def site_info(self, site_name: str) -> Dict[str, Optional[object]]:
        """Metadata for one site; enrichment fields are None for unknown sites."""
        match = self.sites[self.sites[SITE_NAME] == site_name]
        if match.empty:
            return {SITE_NAME: site_name, LATITUDE: None, LONGITUDE: None, AQUATIC_LIFE_USE: None}
        row = match.iloc[0]
        return {
            SITE_NAME: site_name,
            LATITUDE: _none_if_na(row[LATITUDE]),
            LONGITUDE: _none_if_na(row[LONGITUDE]),
            AQUATIC_LIFE_USE: _none_if_na(row[AQUATIC_LIFE_USE]),
        }


def load(observations_source, sites_source) -> DashboardData:
    """
    Load and join the observation and site tables.

    Parameters
    ----------
    observations_source, sites_source : str, path or file-like
        Anything ``pandas.read_csv`` accepts.

    Returns
    -------
    DashboardData

    Raises
    ------
    LoadError
        A source is unreadable, empty, lacks required columns, or holds an
        unparseable timestamp.
    """
    observations = _read_table(observations_source, OBSERVATION_COLUMNS)
    sites = _read_table(sites_source, SITE_COLUMNS)

    observations = observations.copy()
    try:
        observations[TIMESTAMP] = pd.to_datetime(observations[TIMESTAMP], utc=True, format="ISO8601")
    except (ValueError, TypeError) as e:
        raise LoadError(f"Unparseable {TIMESTAMP} value: {e}", _source_name(observations_source)) from e

    missing_times = int(observations[TIMESTAMP].isna().sum())
    if missing_times:
        logger.warning("%d observations have no %s; they are kept without a date",
                       missing_times, TIMESTAMP)

    observations[VALUE] = pd.to_numeric(observations[VALUE], errors="coerce")
    observations[UNIT] = observations[UNIT].astype("string")

    sites = sites[SITE_COLUMNS].copy()
    sites[LATITUDE] = pd.to_numeric(sites[LATITUDE], errors="coerce")
    sites[LONGITUDE] = pd.to_numeric(sites[LONGITUDE], errors="coerce")

    duplicated = sites[SITE_NAME].duplicated(keep="first")
    if duplicated.any():
        logger.warning(
            "Dropping %d duplicate site rows: %s",
            int(duplicated.sum()), sorted(sites.loc[duplicated, SITE_NAME].unique()),
        )
        sites = sites[~duplicated]
    sites = sites.reset_index(drop=True)

    joined = observations.merge(sites, on=SITE_NAME, how="left", validate="many_to_one")

    unmatched = set(observations[SITE_NAME].dropna()) - set(sites[SITE_NAME])
    if unmatched:
        logger.warning("Observations reference unknown sites %s; site fields left empty", sorted(unmatched))

    logger.info(
        "Loaded %d observations across %d sites and %d parameters",
        len(joined), joined[SITE_NAME].nunique(), joined[PARAMETER].nunique(),
    )
    return DashboardData(observations=joined, sites=sites)


def _read_table(source, required: List[str]) -> pd.DataFrame:
    name = _source_name(source)
    try:
        df = pd.read_csv(source)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise LoadError(f"Could not read table: {e}", name) from e

    df = df.rename(columns=COLUMN_ALIASES)
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise MissingColumnsError(missing, name)
    return df


def _source_name(source) -> str:
    return str(getattr(source, "name", source))


def _none_if_na(value):
    return None if pd.isna(value) else value
