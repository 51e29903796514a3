"""Count accidents per month for a batch of years."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from ..settings import DEFAULT_DATA_DIR
from ..utils.logging import level_for_verbosity, setup_logging
from .years import load_years

LOGGER = logging.getLogger(__name__)


def empty_summary() -> pd.DataFrame:
    return pd.DataFrame({"MONTH": pd.Series(dtype="int64")})


def summarize_frames(frames: Iterable[pd.DataFrame]) -> pd.DataFrame:
    """Pivot ``MONTH``/``year`` tables into a month by year count matrix.

    Each distinct year becomes a column named by the year; each distinct
    month becomes a row, ascending. Cells are nullable integers, ``<NA>``
    where a year has no accidents in that month.
    """

    frames = list(frames)
    if not frames:
        return empty_summary()

    combined = pd.concat(frames, ignore_index=True)
    if combined.empty:
        return empty_summary()

    counts = combined.groupby(["year", "MONTH"]).size()
    matrix = (
        counts.unstack("year")
        .sort_index()
        .sort_index(axis=1)  # deterministic column order
        .astype("Int64")
    )
    matrix.columns.name = None
    return matrix.reset_index()


def summarize_years(years: Iterable[object], data_dir: str | Path = DEFAULT_DATA_DIR) -> pd.DataFrame:
    """Return monthly accident counts for ``years``.

    Years that fail to load are skipped with a warning (see
    :func:`fars.etl.years.load_years`); if none load, the result is empty.
    """

    results = load_years(years, data_dir=data_dir)
    loaded = [result.data for result in results if result.ok]
    matrix = summarize_frames(loaded)
    LOGGER.info(
        "Summarised %d of %d requested years into %d monthly rows",
        len(loaded),
        len(results),
        len(matrix),
    )
    return matrix


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("years", nargs="+", help="Years to summarise, e.g. 2013 2014 2015")
    parser.add_argument(
        "--data-dir",
        default=str(DEFAULT_DATA_DIR),
        help="Directory holding accident_<year>.csv.bz2 files (default: current directory)",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Optional CSV path for the matrix; printed to stdout when omitted",
    )
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    parser.add_argument("-v", "--verbose", action="count", default=1, help="Increase log verbosity")
    args = parser.parse_args(list(argv) if argv is not None else None)

    setup_logging(__name__, log_file=args.log_file, level=level_for_verbosity(args.verbose))
    matrix = summarize_years(args.years, data_dir=args.data_dir)

    if args.output:
        matrix.to_csv(args.output, index=False)
        LOGGER.info("Wrote %d rows to %s", len(matrix), args.output)
        return

    print(matrix.to_string(index=False))


if __name__ == "__main__":  # pragma: no cover
    main()
