"""Logging setup for command-line use."""

import logging
from typing import Optional

from .config import get_settings


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Install a single stream handler on the package logger.

    Library code only creates module loggers; applications embedding the
    engine configure handlers themselves.

    Args:
        level: Log level name; defaults to the configured log_level
    """
    level_name = (level or get_settings().log_level).upper()

    package_logger = logging.getLogger("training_load")
    package_logger.setLevel(level_name)

    if not any(getattr(h, "_training_load", False) for h in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._training_load = True
        package_logger.addHandler(handler)
