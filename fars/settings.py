"""Constants describing the FARS accident file convention."""

from pathlib import Path

FILENAME_TEMPLATE = "accident_{year:d}.csv.bz2"

DEFAULT_DATA_DIR = Path(".")

# Canonical column names and the dtypes they are coerced to on load.
REQUIRED_COLUMNS = {
    "STATE": "int64",
    "MONTH": "int64",
    "LATITUDE": "float64",
    "LONGITUD": "float64",
}

# Alternate spellings found across FARS releases.
COLUMN_ALIASES = {
    "LATITUD": "LATITUDE",
    "LONGITUDE": "LONGITUD",
}

# Unknown GPS positions are coded 777.7777/888.8888/999.9999 (longitude) and
# 77.7777/88.8888/99.9999 (latitude); only values above these bounds are dropped.
LONGITUDE_SENTINEL = 900
LATITUDE_SENTINEL = 90

# Single-pixel marker for accident points.
POINT_MARKER = ","
