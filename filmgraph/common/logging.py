# filmgraph/common/logging.py
from __future__ import annotations

import logging
from typing import Optional, Union

PACKAGE_LOGGER = "filmgraph"


def _as_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    return level


def configure_logging(level: Union[int, str]) -> logging.Logger:
    """Set the level on the package logger; module loggers inherit it."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_as_level(level))
    return logger


def get_logger(name: str = PACKAGE_LOGGER, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Return a logger that plays nice with Uvicorn if running under it.
    If no handlers are set, we add a basicConfig once.
    Without an explicit level the logger inherits from the package logger,
    which starts at Settings.log_level until configure_logging() moves it.
    """
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if level is not None:
        logger.setLevel(_as_level(level))
    elif logging.getLogger(PACKAGE_LOGGER).level == logging.NOTSET:
        from filmgraph.common.settings import get_settings
        configure_logging(get_settings().log_level)
    return logger
