"""
Logging Configuration

Sets up console logging for the extraction, list update and label scan
scripts. Log lines go to stderr so stdout carries only the reports and
match results the scripts print.
"""

import logging
import sys

# Package modules log under "koshercheck"; the scripts log under "__main__"
LOGGER_NAMES = ("koshercheck", "__main__")

# Connection chatter from the HTTP stack is only shown with --verbose
HTTP_LOGGER_NAMES = ("urllib3",)

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the package and the calling script.

    Args:
        verbose: If True, set level to DEBUG and show HTTP connection logs
        quiet: If True, set level to WARNING
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Calling twice must not stack handlers
        logger.handlers.clear()
        logger.addHandler(handler)

    for name in HTTP_LOGGER_NAMES:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
