"""Scatter one state's accidents for a year over a simple base map."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, Optional

import geopandas as gpd
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from .etl.records import as_int, load_records, make_filename
from .exceptions import FarsError, InvalidStateError
from .settings import DEFAULT_DATA_DIR, LATITUDE_SENTINEL, LONGITUDE_SENTINEL, POINT_MARKER
from .utils.logging import level_for_verbosity, setup_logging

LOGGER = logging.getLogger(__name__)


def check_state(data: pd.DataFrame, state_num: object) -> int:
    """Return ``state_num`` as an ``int`` if it occurs in ``data['STATE']``."""

    try:
        state = as_int(state_num)
    except ValueError:
        raise InvalidStateError(state_num) from None
    if state not in set(data["STATE"].unique()):
        raise InvalidStateError(state)
    return state


def state_points(data: pd.DataFrame, state: int) -> pd.DataFrame:
    """Return ``LONGITUD``/``LATITUDE`` for ``state`` with unknown positions as NaN.

    The source files code a missing GPS fix as a longitude above 900 or a
    latitude above 90; those values are replaced on a copy, ``data`` is not
    modified.
    """

    points = data.loc[data["STATE"] == state, ["LONGITUD", "LATITUDE"]].copy()
    points.loc[points["LONGITUD"] > LONGITUDE_SENTINEL, "LONGITUD"] = np.nan
    points.loc[points["LATITUDE"] > LATITUDE_SENTINEL, "LATITUDE"] = np.nan
    return points


def coordinate_range(values: pd.Series) -> Optional[tuple[float, float]]:
    """Return ``(min, max)`` of the non-missing ``values``, or ``None``."""
    valid = values.dropna()
    if valid.empty:
        return None
    return float(valid.min()), float(valid.max())


def draw_base_map(ax, xlim, ylim, boundaries=None):
    """Prepare the map axes and return them.

    ``boundaries`` may be a GeoDataFrame or any path ``geopandas.read_file``
    accepts; its outlines are drawn beneath the points. Limits of ``None``
    leave that axis autoscaled.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6))

    if boundaries is not None:
        if not isinstance(boundaries, gpd.GeoDataFrame):
            boundaries = gpd.read_file(boundaries)
        boundaries.boundary.plot(ax=ax, color="grey", linewidth=0.5)

    if xlim is not None:
        ax.set_xlim(*xlim)
    if ylim is not None:
        ax.set_ylim(*ylim)
    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    return ax


def draw_points(ax, longitudes, latitudes):
    """Overlay accident positions; NaN coordinates are skipped by matplotlib."""
    ax.plot(longitudes, latitudes, linestyle="none", marker=POINT_MARKER, color="black")


def plot_state(
    state_num: object,
    year: object,
    data_dir: str | Path = DEFAULT_DATA_DIR,
    *,
    ax=None,
    boundaries=None,
    base_map=draw_base_map,
    draw_points=draw_points,
) -> None:
    """Plot accident locations in ``state_num`` during ``year``.

    Raises ``FileNotFoundError`` when the year's file is absent and
    :class:`~fars.exceptions.InvalidStateError` when the state code does not
    occur in it. A state without accidents is logged and nothing is drawn.
    """

    data = load_records(Path(data_dir) / make_filename(year))
    state = check_state(data, state_num)

    points = state_points(data, state)
    if points.empty:
        LOGGER.info("no accidents to plot")
        return None

    ax = base_map(
        ax,
        coordinate_range(points["LONGITUD"]),
        coordinate_range(points["LATITUDE"]),
        boundaries,
    )
    draw_points(ax, points["LONGITUD"].to_numpy(), points["LATITUDE"].to_numpy())
    LOGGER.debug("plotted %d accidents for state %d in %s", len(points), state, year)
    return None


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("state", help="FARS state code, e.g. 20")
    parser.add_argument("year", help="Accident year, e.g. 2015")
    parser.add_argument(
        "--data-dir",
        default=str(DEFAULT_DATA_DIR),
        help="Directory holding accident_<year>.csv.bz2 files (default: current directory)",
    )
    parser.add_argument(
        "--boundaries",
        default=None,
        help="Optional boundary file (shapefile, GeoJSON, ...) drawn under the points",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="PNG path for the map (default: fars_<state>_<year>.png)",
    )
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    parser.add_argument("-v", "--verbose", action="count", default=1, help="Increase log verbosity")
    args = parser.parse_args(list(argv) if argv is not None else None)

    setup_logging(__name__, log_file=args.log_file, level=level_for_verbosity(args.verbose))
    output = args.output or f"fars_{args.state}_{args.year}.png"

    fig, ax = plt.subplots(figsize=(8, 6))
    try:
        plot_state(args.state, args.year, args.data_dir, ax=ax, boundaries=args.boundaries)
        if not ax.has_data():
            LOGGER.info("Nothing rendered; %s not written", output)
            return
        ax.set_title(f"FARS accidents, state {args.state}, {args.year}")
        fig.tight_layout()
        fig.savefig(output)
        LOGGER.info("Saved map to %s", output)
    except (FileNotFoundError, FarsError) as exc:
        LOGGER.error("%s", exc)
        raise SystemExit(1) from exc
    finally:
        plt.close(fig)


if __name__ == "__main__":  # pragma: no cover
    main()
