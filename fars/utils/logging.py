import logging
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Third-party loggers that chatter at DEBUG/INFO while rendering maps.
NOISY_LOGGERS = ("matplotlib", "PIL", "fiona", "pyogrio")


def level_for_verbosity(verbose: int) -> int:
    """Map a count of ``-v`` flags to a logging level."""
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def setup_logging(name: str = __name__, log_file: Optional[str] = None,
                  level: int = logging.INFO,
                  quiet: Iterable[str] = NOISY_LOGGERS) -> logging.Logger:
    """Configure root logging for a command-line run and return a logger.

    Parameters
    ----------
    name : str
        Name of the logger to return.
    log_file : Optional[str]
        Optional file path that receives a copy of every record.
    level : int
        Root logging level, defaults to :data:`logging.INFO`.
    quiet : Iterable[str]
        Logger names held at WARNING regardless of ``level``.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
    for noisy in quiet:
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))
    return logging.getLogger(name)
