"""Exception hierarchy for fars."""

from __future__ import annotations

from typing import Iterable


class FarsError(Exception):
    """Base exception for all fars errors."""


class InvalidYearError(FarsError, ValueError):
    """A year could not be coerced to an integer."""

    def __init__(self, year: object) -> None:
        self.year = year
        super().__init__(f"invalid year: {year!r}")


class InvalidStateError(FarsError, ValueError):
    """A state code is not present in the loaded accident data."""

    def __init__(self, state: object) -> None:
        self.state = state
        super().__init__(f"invalid STATE number: {state}")


class MissingColumnsError(FarsError, ValueError):
    """An accident file lacks columns the pipeline consumes."""

    def __init__(self, path: object, missing: Iterable[str]) -> None:
        self.path = path
        self.missing = sorted(missing)
        super().__init__(
            f"{path} is missing required columns: {', '.join(self.missing)}"
        )


class InvalidYearWarning(UserWarning):
    """A year in a batch could not be loaded and was skipped."""
