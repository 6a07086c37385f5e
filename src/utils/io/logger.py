"""Centralized logger used across the code-base.

Exposes the static :class:`Logger` facade (``debug``, ``info``, ``warning``,
``error``, ``success`` and ``separator``) on top of the standard :mod:`logging`
module, rendering records on the console through :class:`rich.logging.RichHandler`.
The level is read once from the ``LOG_LEVEL`` environment variable.
"""

import logging
import os
from typing import Optional

from rich.logging import RichHandler

SUCCESS_LEVEL = 25
logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")


class Logger:
    """Static logging facade bound to the ``market_status`` logger."""

    _NAME = "market_status"
    _SEPARATOR = "-" * 60
    _logger: Optional[logging.Logger] = None

    @staticmethod
    def _get() -> logging.Logger:
        if Logger._logger is None:
            logger = logging.getLogger(Logger._NAME)
            level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").strip().upper())
            logger.setLevel(level if isinstance(level, int) else logging.INFO)
            if not logger.handlers:
                handler = RichHandler(
                    show_time=True,
                    show_path=False,
                    markup=False,
                    log_time_format="%Y-%m-%d %H:%M:%S",
                )
                handler.setFormatter(logging.Formatter("%(message)s"))
                logger.addHandler(handler)
            logger.propagate = False
            Logger._logger = logger
        return Logger._logger

    @staticmethod
    def debug(message: str) -> None:
        """Log a debug message."""
        Logger._get().debug(message)

    @staticmethod
    def info(message: str) -> None:
        """Log an informational message."""
        Logger._get().info(message)

    @staticmethod
    def warning(message: str) -> None:
        """Log a warning message."""
        Logger._get().warning(message)

    @staticmethod
    def error(message: str) -> None:
        """Log an error message."""
        Logger._get().error(message)

    @staticmethod
    def success(message: str) -> None:
        """Log a completed step at the custom SUCCESS level."""
        Logger._get().log(SUCCESS_LEVEL, message)

    @staticmethod
    def separator() -> None:
        """Log a visual separator line."""
        Logger._get().info(Logger._SEPARATOR)
