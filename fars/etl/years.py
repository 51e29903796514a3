"""Load several accident years at once, skipping years that fail."""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from ..exceptions import InvalidYearWarning
from ..settings import DEFAULT_DATA_DIR
from .records import coerce_year, load_records, make_filename

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class YearResult:
    """Outcome of loading one year of a batch.

    ``data`` holds the ``MONTH``/``year`` table, or ``None`` when the year
    could not be loaded; ``error`` then carries the reason.
    """

    year: object
    data: Optional[pd.DataFrame] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.data is not None


def tag_year(records: pd.DataFrame, year: int) -> pd.DataFrame:
    """Return ``MONTH`` plus a constant ``year`` column."""
    tagged = records.loc[:, ["MONTH"]].copy()
    tagged["year"] = pd.Series(year, index=tagged.index, dtype="int64")
    return tagged


def load_years(years: Iterable[object], data_dir: str | Path = DEFAULT_DATA_DIR) -> list[YearResult]:
    """Load each of ``years`` from ``data_dir``.

    Returns one :class:`YearResult` per input value, in input order. A year
    whose file is missing or unreadable yields an empty result, a WARNING
    log record and an :class:`~fars.exceptions.InvalidYearWarning`; the
    remaining years are still loaded. The log record is written for every
    failed slot, repeats included, whatever the active warning filters.
    """

    data_dir = Path(data_dir)
    results = []
    for year in years:
        try:
            year = coerce_year(year)
            records = load_records(data_dir / make_filename(year))
            result = YearResult(year=year, data=tag_year(records, year))
        except Exception as exc:
            LOGGER.warning("invalid year: %s", year)
            LOGGER.debug("skipping year %s: %s", year, exc)
            warnings.warn(f"invalid year: {year}", InvalidYearWarning, stacklevel=2)
            result = YearResult(year=year, error=str(exc))
        results.append(result)
    return results
