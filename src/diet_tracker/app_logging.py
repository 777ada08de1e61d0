"""Logging configuration helpers."""

import logging

_APP_LOGGER = "diet_tracker"
_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Attach one stream handler to the ``diet_tracker`` logger.

    Safe to call more than once; later calls only change the level.
    """
    logger = logging.getLogger(_APP_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    # httpx logs full request URLs at INFO, and FDC URLs carry the api_key.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
