"""
Logging Configuration

Sets up the "linesheet" logger for command line runs. Messages go to
stderr so stdout can carry the JSON stats report.
"""

import logging
import sys

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"

# Third-party loggers that are noisy while fetching from Airtable
HTTP_LOGGERS = ("urllib3", "requests")


def _pick_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure line sheet logging.

    Args:
        verbose: Log planning and HTTP details (DEBUG)
        quiet: Only warnings and errors

    HTTP library loggers stay at WARNING unless verbose is set.
    """
    level = _pick_level(verbose, quiet)

    logger = logging.getLogger("linesheet")
    logger.setLevel(level)
    # Replace rather than add so repeated calls keep a single handler
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(stream)

    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
