"""
Domino Duel - Logging Configuration

Modules log through ``logging.getLogger(__name__)``; entrypoints call
``configure_logging`` once to attach a handler at the configured level.
"""

import logging

from src.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(settings: Settings) -> int:
    """Map settings to a logging level. Debug mode always wins."""
    if settings.debug:
        return logging.DEBUG
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {settings.log_level!r}.")
    return level


def configure_logging(settings: Settings | None = None) -> int:
    """
    Configure the root logger from application settings.

    Args:
        settings: Settings to use (cached settings if None)

    Returns:
        The level applied
    """
    settings = settings or get_settings()
    level = resolve_level(settings)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    return level
