"""
Logging setup for jsonddl.

Modules log through logging.getLogger(__name__); this module only
wires the root "jsonddl" logger to a stream handler once.
"""

import logging
import sys
from typing import Optional, TextIO, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "jsonddl-stream"


def setup_logging(
    level: Union[int, str] = "INFO",
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level name or number
        stream: Where to write log lines (defaults to stderr)

    Returns:
        The configured "jsonddl" logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("jsonddl")
    logger.setLevel(level)

    # Replace our own handler on repeated calls, leave foreign handlers alone
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger
