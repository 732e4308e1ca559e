"""WaterView — summary statistics table for the dashboard."""

from typing import Dict, Optional

import pandas as pd

from analysis.summary_stats import format_date
from config.constants import NO_DATA_MESSAGE


def build_summary_table(summary: Optional[Dict]) -> pd.DataFrame:
    """One-row statistics table, or a one-row "No data" message."""
    if summary is None:
        return pd.DataFrame({"Message": [NO_DATA_MESSAGE]})

    return pd.DataFrame([{
        "Site": summary["site"],
        "AquaticUse": summary["aquatic_use"] or "—",
        "Records": summary["records"],
        "Mean": _fmt(summary["mean"]),
        "Min": _fmt(summary["min"]),
        "Max": _fmt(summary["max"]),
        "Start": format_date(summary["start_date"]),
        "End": format_date(summary["end_date"]),
    }])


def _fmt(x) -> str:
    return "—" if x is None else f"{x:.2f}"
