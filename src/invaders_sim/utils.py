"""
Invaders Sim utils
"""

from __future__ import annotations

import logging

from mini_arcade_core.utils import logger
from mini_arcade_core.utils.logging import (
    configure_logging as _configure_core_logging,
)

__all__ = ["configure_logging", "logger"]


def configure_logging(level: int = logging.INFO) -> None:
    """
    Set the console logging level for the game driver.

    The simulation itself never calls this; it only emits records through
    ``logger``.

    :param level: Logging level
    :type level: int
    """
    _configure_core_logging(level)
    logger.setLevel(level)
