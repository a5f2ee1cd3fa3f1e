"""Logging setup shared by the builder and generator modules."""

from __future__ import annotations

import logging
from typing import Final

from levelbuilder.models.settings import get_settings

_LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_HANDLER_NAME: Final[str] = "levelbuilder-stderr"


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """Return ``levelbuilder.<name>`` with a single stderr handler.

    An explicit ``level`` wins; otherwise ``LEVELBUILDER_LOG_LEVEL`` decides.
    Calling again for the same name reconfigures the existing handler.
    """
    if level is None:
        level = get_settings().log_level

    logger = logging.getLogger(f"levelbuilder.{name}")
    handler = next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    handler.setLevel(level)
    logger.setLevel(level)
    logger.propagate = False
    return logger
