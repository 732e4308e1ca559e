"""
WaterView — Runtime Settings

Input file locations and log level. Each value can be overridden through
an environment variable before `streamlit run app.py`. Default paths are
resolved against the repository root, not the working directory.
"""

import os
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent.parent / "Data"

OBSERVATIONS_CSV = os.environ.get("WATERVIEW_OBSERVATIONS_CSV", str(DATA_DIR / "wqp_data.csv"))
SITES_CSV = os.environ.get("WATERVIEW_SITES_CSV", str(DATA_DIR / "streams_sites.csv"))

LOG_LEVEL = os.environ.get("WATERVIEW_LOG_LEVEL", "INFO").upper()
