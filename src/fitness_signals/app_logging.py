"""Logging configuration helpers.

The engines only create module loggers; the host application calls
``configure_logging`` once at startup to attach output.
"""

import logging


def configure_logging() -> None:
    """Configure package logging with a single stream handler."""
    logger = logging.getLogger("fitness_signals")
    logger.setLevel(logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
