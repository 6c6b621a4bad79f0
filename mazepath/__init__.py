from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mazepath")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .alg import (
    UNREACHED,
    DistanceField,
    MazeSession,
    Navigator,
    PathFinder,
    compute_distance_field,
    reconstruct_path,
)
from .config import LoggingConfig, MazeConfig, NavigatorConfig, SessionConfig, load_config, save_config
from .core import XorShiftRandom
from .geometry import (
    LogicalGrid,
    MazeBits,
    MazeGenerator,
    PhysicalGrid,
    generate_maze,
    verify_path_connectivity,
    verify_perfect_maze,
)
from .utils import (
    DegenerateSeedError,
    InvalidConfigurationError,
    MazeError,
    UnreachableError,
    configure_logging,
    get_logger,
)

__all__ = [
    "UNREACHED",
    "DegenerateSeedError",
    "DistanceField",
    "InvalidConfigurationError",
    "LogicalGrid",
    "LoggingConfig",
    "MazeBits",
    "MazeConfig",
    "MazeError",
    "MazeGenerator",
    "MazeSession",
    "Navigator",
    "NavigatorConfig",
    "PathFinder",
    "PhysicalGrid",
    "SessionConfig",
    "UnreachableError",
    "XorShiftRandom",
    "__version__",
    "configure_logging",
    "generate_maze",
    "get_logger",
    "load_config",
    "reconstruct_path",
    "compute_distance_field",
    "save_config",
    "verify_path_connectivity",
    "verify_perfect_maze",
]
