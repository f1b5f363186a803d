"""Log setup for command-line runs of linefit."""
import logging
import sys
from typing import Optional

LOGGER_NAME = "linefit"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the ``linefit`` logger and return it.

    Discarded input lines and fatal load/fit/plot errors are logged here;
    the per-iteration cost lines are plain stdout output, so log records go
    to stderr instead.

    Args:
        level: threshold for the logger and every handler it gets
        log_file: when given, records are also written to this path
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    # main() may run several times in one process (tests, runpy)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to stderr%s", f" and {log_file}" if log_file else "")
    return logger
