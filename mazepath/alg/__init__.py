"""
Path finding and navigation over generated mazes.
"""

from .navigator import Navigator
from .path_finder import UNREACHED, DistanceField, PathFinder, compute_distance_field, reconstruct_path
from .session import MazeSession

__all__ = [
    "UNREACHED",
    "DistanceField",
    "MazeSession",
    "Navigator",
    "PathFinder",
    "compute_distance_field",
    "reconstruct_path",
]
