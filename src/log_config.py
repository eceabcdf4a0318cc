"""Logging setup for the drill service."""

import logging

from settings import get_config

LOGGER_NAME = "drill"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_CONFIGURED = False


def _parse_level(value: str | None) -> int:
    """Map a level name such as 'debug' to its logging constant (INFO if unknown)."""
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(force: bool = False) -> logging.Logger:
    """Install a stream handler for the service and the core packages.

    Safe to call more than once; later calls are no-ops unless ``force``.

    Returns:
        The service logger
    """
    global _CONFIGURED
    level = _parse_level(get_config().log_level)

    if force or not _CONFIGURED:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        for name in (LOGGER_NAME, "services"):
            logger = logging.getLogger(name)
            logger.handlers.clear()
            logger.addHandler(handler)
            logger.setLevel(level)
            logger.propagate = False
        _CONFIGURED = True

    return logging.getLogger(LOGGER_NAME)
