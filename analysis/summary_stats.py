"""
WaterView — Summary Statistics

Descriptive statistics for the filtered observations of one site and
parameter. Missing values are excluded from every statistic.
"""

from typing import Dict, Optional

import pandas as pd

from config.constants import AQUATIC_LIFE_USE, DATE_FORMAT, SITE_NAME, TIMESTAMP, VALUE


def compute_summary(filtered: pd.DataFrame, site_info: Optional[Dict] = None) -> Optional[Dict]:
    """
    Summarise a filtered observation set.

    Parameters
    ----------
    filtered : pd.DataFrame
        Output of `filter_observations`.
    site_info : dict, optional
        `DashboardData.site_info()` for the selected site.

    Returns
    -------
    dict or None
        Keys: site, aquatic_use, records, mean, min, max, start_date,
        end_date. Numeric statistics are rounded to 2 dp and are None when
        every value is missing. Returns None for an empty set.
    """
    if filtered.empty:
        return None

    site_info = site_info or {}
    values = filtered[VALUE].dropna()
    times = filtered[TIMESTAMP].dropna()

    return {
        "site": site_info.get(SITE_NAME, filtered[SITE_NAME].iloc[0]),
        "aquatic_use": site_info.get(AQUATIC_LIFE_USE),
        "records": int(values.count()),
        "mean": _round(values.mean()),
        "min": _round(values.min()),
        "max": _round(values.max()),
        "start_date": times.min() if not times.empty else None,
        "end_date": times.max() if not times.empty else None,
    }


def format_date(ts) -> str:
    return ts.strftime(DATE_FORMAT) if ts is not None and not pd.isna(ts) else "—"


def _round(x) -> Optional[float]:
    if pd.isna(x):
        return None
    return round(float(x), 2)
