"""Locate and read yearly FARS accident files."""

from __future__ import annotations

import logging
import warnings
from pathlib import Path

import pandas as pd

from ..exceptions import InvalidYearError, MissingColumnsError
from ..settings import COLUMN_ALIASES, FILENAME_TEMPLATE, REQUIRED_COLUMNS

LOGGER = logging.getLogger(__name__)


def as_int(value: object) -> int:
    """Return ``value`` as an ``int``, truncating fractional values.

    Raises ``ValueError`` when ``value`` is not numeric.
    """

    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        # numeric strings such as "2015.7" only convert through float
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            raise ValueError(f"not an integer: {value!r}") from None


def coerce_year(year: object) -> int:
    """Return ``year`` as an ``int``, truncating fractional values."""
    try:
        return as_int(year)
    except ValueError:
        raise InvalidYearError(year) from None


def make_filename(year: object) -> str:
    """Return the accident file name for ``year``, e.g. ``accident_2015.csv.bz2``."""
    return FILENAME_TEMPLATE.format(year=coerce_year(year))


def normalise_records(raw: pd.DataFrame, source: object = "<frame>") -> pd.DataFrame:
    """Apply the canonical accident schema to ``raw``.

    Parameters
    ----------
    raw:
        Table as parsed from an accident file.
    source:
        Path or label used in error messages.

    Returns
    -------
    pd.DataFrame
        A new frame with ``STATE``, ``MONTH``, ``LATITUDE`` and ``LONGITUD``
        coerced to their schema dtypes. Other columns are kept as read.
    """

    renames = {
        alias: canonical
        for alias, canonical in COLUMN_ALIASES.items()
        if alias in raw.columns and canonical not in raw.columns
    }
    records = raw.rename(columns=renames)

    missing = set(REQUIRED_COLUMNS) - set(records.columns)
    if missing:
        LOGGER.error("%s is missing required columns: %s", source, sorted(missing))
        raise MissingColumnsError(source, missing)

    return records.astype(REQUIRED_COLUMNS)


def load_records(path: str | Path) -> pd.DataFrame:
    """Read one accident file into a table.

    The file must exist; parser errors raised by pandas are not caught.
    """

    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"file '{path}' does not exist")

    LOGGER.debug("reading accident file %s", path)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", pd.errors.DtypeWarning)
        raw = pd.read_csv(path, low_memory=False)

    records = normalise_records(raw, path)
    LOGGER.debug("read %d accidents from %s", len(records), path)
    return records
