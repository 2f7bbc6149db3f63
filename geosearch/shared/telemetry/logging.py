"""Logging configuration for hosts embedding the search coordinator."""

import logging
import sys

from geosearch.core.config import Settings, get_settings


def setup_logging(settings: Settings | None = None) -> None:
    """Configure logging for the geosearch package.

    Level is settings.log_level when set, else DEBUG when settings.debug is
    True, otherwise INFO. Output goes to stdout.
    """
    s = settings or get_settings()
    if s.log_level:
        log_level = logging.getLevelName(s.log_level.upper())
    else:
        log_level = logging.DEBUG if s.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
