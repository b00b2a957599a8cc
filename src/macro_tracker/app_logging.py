"""Logging configuration helpers."""

import logging

LOGGER_NAME = "macro_tracker"


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Safe to call more than once; later calls only adjust the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
