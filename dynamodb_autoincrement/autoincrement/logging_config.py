"""
Logging configuration for autoincrement commands.

Verbosity follows the CLI's -v flags: none shows warnings only, -v shows
INFO, -vv shows DEBUG, -vvv also shows DEBUG output from boto3/botocore.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LIBRARY_LOGGERS = ("boto3", "botocore", "urllib3")


def setup_logging(verbose: int = 0) -> None:
    """
    Configure root logging for a verbosity level.

    Args:
        verbose: Number of -v flags given on the command line
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)

    library_level = logging.DEBUG if verbose >= 3 else logging.WARNING
    for name in LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)
