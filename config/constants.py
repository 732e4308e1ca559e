"""
WaterView — Constants

Column names, map tiles and styling shared by the loader, the map, the
chart and the summary table.
"""

# =============================================================================
# Input Columns
# =============================================================================
SITE_NAME = "site_name"
PARAMETER = "parameter"
VALUE = "value"
UNIT = "unit"
TIMESTAMP = "date_time"
LATITUDE = "latitude"
LONGITUDE = "longitude"
AQUATIC_LIFE_USE = "aquatic_life_use"

OBSERVATION_COLUMNS = [SITE_NAME, PARAMETER, VALUE, UNIT, TIMESTAMP]
SITE_COLUMNS = [SITE_NAME, LATITUDE, LONGITUDE, AQUATIC_LIFE_USE]

# Headers used by the Water Quality Portal export the dashboard was built on
COLUMN_ALIASES = {
    "SITE_NAME": SITE_NAME,
    "LAT": LATITUDE,
    "LON": LONGITUDE,
    "AquaticLifeUse": AQUATIC_LIFE_USE,
}

# =============================================================================
# Map
# =============================================================================
MAP_TILES = "CartoDB positron"
MAP_DEFAULT_CENTER = [39.8, -98.6]   # continental US
MAP_DEFAULT_ZOOM = 4

SITE_MARKER = {
    "color": "blue",
    "radius": 6,
    "fill_opacity": 0.9,
}
SELECTED_MARKER = {
    "color": "red",
    "radius": 8,
    "fill_opacity": 1.0,
}
SELECTED_LAYER_NAME = "selected"

# =============================================================================
# Chart
# =============================================================================
CHART_LINE_COLOR = "blue"
CHART_MARKER_COLOR = "darkblue"
CHART_HEIGHT = 500

# =============================================================================
# Page
# =============================================================================
PAGE_TITLE = "Example Water Quality Dashboard"
NO_DATA_MESSAGE = "No data"
DATE_FORMAT = "%Y-%m-%d"
