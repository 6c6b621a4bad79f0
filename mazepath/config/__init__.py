"""
Configuration system for mazepath.

Example:
    >>> from mazepath.config import SessionConfig, load_config
    >>> config = SessionConfig(maze={"width": 20, "height": 10, "seed": 1})
    >>> config.maze.physical_shape
    (20, 40)
"""

from .core import LoggingConfig, MazeConfig, NavigatorConfig, SessionConfig
from .io import load_config, save_config

__all__ = [
    "LoggingConfig",
    "MazeConfig",
    "NavigatorConfig",
    "SessionConfig",
    "load_config",
    "save_config",
]
