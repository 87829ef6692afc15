import logging
import sys
from functools import lru_cache

from .config import LOG_LEVEL


@lru_cache(maxsize=1)
def configure_logging() -> None:
    """Configure console logging for the tasklist package.

    Runs once per process; later calls are no-ops.
    """
    log_level = getattr(logging, LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )

    logging.getLogger("tasklist").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
