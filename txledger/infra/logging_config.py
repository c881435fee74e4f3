"""Logging setup for the replay driver and CLI.

Reports are written to stdout; every log record goes to stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "txledger"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", stream: TextIO | None = None) -> logging.Logger:
    """Install a single stderr handler on the txledger logger.

    Calling it again replaces the handler instead of stacking a second one.
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))

    return logger
