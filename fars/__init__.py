__all__ = [
    "make_filename",
    "load_records",
    "load_years",
    "summarize_years",
    "plot_state",
    "YearResult",
]
__version__ = "0.1.0"

from .etl.records import load_records, make_filename
from .etl.summary import summarize_years
from .etl.years import YearResult, load_years


def __getattr__(name):
    # fars.maps pulls in matplotlib and geopandas; load it on first use
    if name == "plot_state":
        from .maps import plot_state
        return plot_state
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
