# collection_client/logging_config.py
from __future__ import annotations
import logging

LOGGER_NAME = "collection_client"


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a console handler to the client logger. Safe to call repeatedly."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")

        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(fmt)
        logger.addHandler(stream_handler)

    logger.propagate = False
    return logger
