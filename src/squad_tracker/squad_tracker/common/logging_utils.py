from __future__ import annotations

import logging

# Parent of every module logger in this package, whichever import path was used.
PACKAGE_LOGGER = __name__.rsplit(".", 2)[0]
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Safe to call more than once (e.g. one app per test).
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
