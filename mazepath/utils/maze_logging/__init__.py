"""
Logging utilities for mazepath.

Usage:
    >>> from mazepath.utils.maze_logging import get_logger, configure_logging
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Generating maze...")
"""

from __future__ import annotations

from .logger import (
    LoggedOperation,
    LogSettings,
    MazeFormatter,
    MazeLogger,
    configure_logging,
    configure_logging_from,
    get_logger,
    log_maze_summary,
    log_path_summary,
)

__all__ = [
    "LoggedOperation",
    "LogSettings",
    "MazeFormatter",
    "MazeLogger",
    "configure_logging",
    "configure_logging_from",
    "get_logger",
    "log_maze_summary",
    "log_path_summary",
]
