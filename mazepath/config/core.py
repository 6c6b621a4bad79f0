"""
Session configuration models.

Configurations say WHAT maze to build and how long to walk it; the random
stream itself is passed around explicitly and never lives in a config.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mazepath.core.random_source import MASK32


class MazeConfig(BaseModel):
    """
    Configuration for maze generation.

    Attributes
    ----------
    width : int
        Logical width, the physical grid is twice as wide (default: 200)
    height : int
        Logical height, the physical grid is twice as tall (default: 100)
    mutation_rate : int
        Each wall opens with probability 1/mutation_rate; 0 disables
        mutation (default: 100)
    seed : int | None
        Seed of the xorshift stream; None derives one from the clock
    """

    width: int = Field(200, ge=1, description="Logical maze width")
    height: int = Field(100, ge=1, description="Logical maze height")
    mutation_rate: int = Field(100, ge=0, description="Inverse probability that a wall opens, 0 disables")
    seed: int | None = Field(None, description="xorshift seed, None for a time-derived seed")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v: int | None) -> int | None:
        """Reject seeds that leave xorshift in its zero state."""
        if v is not None and v & MASK32 == 0:
            raise ValueError(f"seed {v} masks to a zero xorshift state")
        return v

    @property
    def physical_width(self) -> int:
        return 2 * self.width

    @property
    def physical_height(self) -> int:
        return 2 * self.height

    @property
    def physical_shape(self) -> tuple[int, int]:
        """Shape ``(height, width)`` of the physical grid array."""
        return (self.physical_height, self.physical_width)


class NavigatorConfig(BaseModel):
    """
    Configuration for walking a maze.

    Attributes
    ----------
    max_steps : int
        Number of ``advance()`` calls a session walk issues (default: 1000)
    """

    max_steps: int = Field(1000, ge=0, description="advance() calls per walk")


class LoggingConfig(BaseModel):
    """
    Configuration for logging.

    Attributes
    ----------
    level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
        Logging level (default: WARNING)
    log_to_file : bool
        Also write logs to a file (default: False)
    log_file_path : str | None
        Log file; a timestamped file under ./logs when None
    use_colors : bool
        Colored console output when colorlog is installed (default: True)
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_to_file: bool = False
    log_file_path: str | None = None
    use_colors: bool = True

    @model_validator(mode="after")
    def validate_log_file(self) -> LoggingConfig:
        """A log file path only makes sense when logging to file."""
        if self.log_file_path is not None and not self.log_to_file:
            raise ValueError("log_to_file must be True when log_file_path is provided")
        return self


class SessionConfig(BaseModel):
    """Top-level configuration of a maze session."""

    maze: MazeConfig = Field(default_factory=MazeConfig)
    navigator: NavigatorConfig = Field(default_factory=NavigatorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
