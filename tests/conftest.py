import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest


def _accident_rows(months, state=20, latitude=38.5, longitude=-97.5):
    n = len(months)
    return pd.DataFrame(
        {
            "STATE": [state] * n,
            "ST_CASE": list(range(1, n + 1)),
            "MONTH": list(months),
            "LATITUDE": [latitude] * n,
            "LONGITUD": [longitude] * n,
        }
    )


@pytest.fixture
def accident_rows():
    """Build a FARS-like accident table with one row per entry of ``months``."""
    return _accident_rows


@pytest.fixture
def write_accidents(tmp_path):
    """Write a table to ``tmp_path/accident_<year>.csv.bz2`` and return its path."""

    def _write(year, frame):
        path = tmp_path / f"accident_{year}.csv.bz2"
        frame.to_csv(path, index=False)
        return path

    return _write
