"""Shared utilities: structured exceptions and logging."""

from .exceptions import (
    DegenerateSeedError,
    InvalidConfigurationError,
    MazeError,
    UnreachableError,
    validate_cell,
    validate_dimensions,
)
from .maze_logging import configure_logging, configure_logging_from, get_logger

__all__ = [
    "DegenerateSeedError",
    "InvalidConfigurationError",
    "MazeError",
    "UnreachableError",
    "configure_logging",
    "configure_logging_from",
    "get_logger",
    "validate_cell",
    "validate_dimensions",
]
