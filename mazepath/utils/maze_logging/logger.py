"""
Logging Infrastructure for mazepath

Provides structured logging with configurable levels, formatting, and optional
color support for debugging maze generation and path finding.
"""

from __future__ import annotations

import logging
import sys
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

try:
    import colorlog

    COLORLOG_AVAILABLE = True
except ImportError:
    COLORLOG_AVAILABLE = False

if TYPE_CHECKING:
    from mazepath.config.core import LoggingConfig
    from mazepath.geometry.maze_generator import LogicalGrid, PhysicalGrid

_FORMAT = "%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


class MazeFormatter(logging.Formatter):
    """Formatter for mazepath logging with optional colors and source location."""

    def __init__(self, use_colors: bool = False, include_location: bool = False):
        self.use_colors = use_colors and COLORLOG_AVAILABLE
        self.include_location = include_location

        format_str = _FORMAT
        if self.include_location:
            format_str += " [%(filename)s:%(lineno)d]"

        if self.use_colors:
            self.colored_formatter = colorlog.ColoredFormatter(
                "%(log_color)s" + format_str,
                datefmt=_DATEFMT,
                log_colors={
                    "DEBUG": "cyan",
                    "INFO": "green",
                    "WARNING": "yellow",
                    "ERROR": "red",
                    "CRITICAL": "red,bg_white",
                },
            )

        super().__init__(format_str, datefmt=_DATEFMT)

    def format(self, record):
        if self.use_colors:
            return self.colored_formatter.format(record)
        return super().format(record)


@dataclass(frozen=True)
class LogSettings:
    """
    Logging options applied to every mazepath logger.

    Attributes:
        level: Numeric logging level
        log_file: File that receives a copy of every record, or None
        use_colors: Colored console output (only when colorlog is installed)
        include_location: Append ``[file:line]`` to each record
    """

    level: int = logging.WARNING
    log_file: Path | None = None
    use_colors: bool = True
    include_location: bool = False

    @classmethod
    def from_options(
        cls,
        level: str | int = "INFO",
        log_to_file: bool = False,
        log_file_path: str | Path | None = None,
        use_colors: bool = True,
        include_location: bool = False,
    ) -> LogSettings:
        if isinstance(level, str):
            name = level.upper()
            level = logging.getLevelName(name)
            if not isinstance(level, int):
                raise ValueError(f"Unknown logging level: {name}")

        log_file = None
        if log_to_file:
            log_file = Path(log_file_path) if log_file_path is not None else _timestamped_log_file()

        return cls(
            level=level,
            log_file=log_file,
            use_colors=use_colors and COLORLOG_AVAILABLE,
            include_location=include_location,
        )

    def build_handlers(self) -> list[logging.Handler]:
        """Console handler on stdout, plus a plain-text file handler when a file is set."""
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(MazeFormatter(use_colors=self.use_colors, include_location=self.include_location))
        handlers: list[logging.Handler] = [console]

        if self.log_file is not None:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setFormatter(MazeFormatter(use_colors=False, include_location=self.include_location))
            handlers.append(file_handler)

        for handler in handlers:
            handler.setLevel(self.level)
        return handlers


def _timestamped_log_file() -> Path:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Path.cwd() / "logs" / f"mazepath_{timestamp}.log"


class MazeLogger:
    """
    Registry of mazepath loggers sharing one ``LogSettings``.

    Loggers are created once per name and cached. Creation uses double-check
    locking so concurrent callers never attach duplicate handlers, and
    ``configure`` re-applies new settings to every cached logger.
    """

    _lock: ClassVar[threading.Lock] = threading.Lock()
    _loggers: ClassVar[dict[str, logging.Logger]] = {}
    _settings: ClassVar[LogSettings] = LogSettings()

    @classmethod
    def settings(cls) -> LogSettings:
        return cls._settings

    @classmethod
    def configure(cls, **options) -> LogSettings:
        """
        Replace the global settings and rebuild handlers on cached loggers.

        Keyword Args:
            level: Logging level name or number
            log_to_file: Whether to also log to a file
            log_file_path: Log file; a timestamped file under ./logs when omitted
            use_colors: Use colored terminal output if available
            include_location: Include file location in log messages

        Returns:
            The settings now in effect
        """
        settings = LogSettings.from_options(**options)
        with cls._lock:
            cls._settings = settings
            for logger in cls._loggers.values():
                cls._apply(logger, settings)
        return settings

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if name in cls._loggers:
            return cls._loggers[name]

        with cls._lock:
            if name not in cls._loggers:
                logger = logging.getLogger(name)

                # Loggers configured elsewhere keep their handlers
                if not logger.handlers:
                    cls._apply(logger, cls._settings)

                cls._loggers[name] = logger

        return cls._loggers[name]

    @staticmethod
    def _apply(logger: logging.Logger, settings: LogSettings):
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(settings.level)
        for handler in settings.build_handlers():
            logger.addHandler(handler)
        logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger for the current module.

    Args:
        name: Logger name (if None, uses calling module name)

    Returns:
        Configured logger instance
    """
    if name is None:
        import inspect

        frame = inspect.currentframe()
        if frame and frame.f_back:
            name = frame.f_back.f_globals.get("__name__", "mazepath")
        else:
            name = "mazepath"

    return MazeLogger.get_logger(name)


def configure_logging(**kwargs) -> LogSettings:
    """Configure global logging settings; see ``MazeLogger.configure``."""
    return MazeLogger.configure(**kwargs)


def configure_logging_from(config: LoggingConfig, verbose: bool = False) -> LogSettings:
    """
    Apply a ``LoggingConfig`` section, forcing DEBUG when ``verbose``.

    Source locations are included at DEBUG level.
    """
    level = "DEBUG" if verbose else config.level
    return MazeLogger.configure(
        level=level,
        log_to_file=config.log_to_file,
        log_file_path=config.log_file_path,
        use_colors=config.use_colors,
        include_location=level == "DEBUG",
    )


def log_maze_summary(logger: logging.Logger, logical: LogicalGrid, physical: PhysicalGrid):
    """Log the shape and connectivity counts of a freshly generated maze."""
    logger.info(
        f"Maze {logical.width}x{logical.height} -> {physical.width}x{physical.height} cells, "
        f"{logical.edge_count()} passages, {physical.path_count()} PATH cells"
    )


def log_path_summary(logger: logging.Logger, start: tuple[int, int], goal: tuple[int, int], length: int):
    """Log a reconstructed path."""
    logger.debug(f"Path {start} -> {goal}: {length} cells ({max(length - 1, 0)} steps)")


class LoggedOperation:
    """Context manager for logging timed operations."""

    def __init__(self, logger: logging.Logger, operation_name: str, log_level: int = logging.DEBUG):
        self.logger = logger
        self.operation_name = operation_name
        self.log_level = log_level
        self.start_time: float | None = None
        self.duration: float | None = None

    def __enter__(self):
        self.logger.log(self.log_level, f"Starting {self.operation_name}")
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - (self.start_time or 0.0)

        if exc_type is None:
            self.logger.log(self.log_level, f"Completed {self.operation_name} in {self.duration:.3f}s")
        else:
            self.logger.error(f"Failed {self.operation_name} after {self.duration:.3f}s: {exc_val}")

        return False
