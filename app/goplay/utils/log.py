"""Logging setup for the goplay CLI."""

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Configure the root logger for a CLI run.

    A stderr handler is added only if the root logger has none yet.

    Args:
        verbose: Log at DEBUG when True, otherwise only warnings and errors.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
