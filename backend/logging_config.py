"""Logging setup shared by the CLI runner and the API"""
import logging
import sys

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Third-party loggers that are noisy at INFO
QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the root logger to write to stderr.

    Safe to call more than once: existing root handlers are replaced so
    repeated CLI invocations in one process don't duplicate output.
    """
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root
