"""Logging setup for applications using nextera_utils."""

import logging
import sys

from nextera_config.settings import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Settings) -> int:
    """Configure the root logger from settings.

    Returns
    -------
    The effective log level
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("nextera_utils").setLevel(log_level)
    logging.getLogger("nextera_config").setLevel(log_level)

    return log_level
