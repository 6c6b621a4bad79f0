"""
Maze geometry: logical spanning trees and physical wall grids.

Examples
--------
>>> from mazepath.core import XorShiftRandom
>>> from mazepath.geometry import MazeGenerator
>>> logical, physical = MazeGenerator.generate(20, 10, XorShiftRandom(42), mutation_rate=100)
"""

from .maze_generator import (
    DIRECTION_BITS,
    DIRECTIONS,
    SCAN_ORDER,
    LogicalGrid,
    MazeBits,
    MazeGenerator,
    PhysicalGrid,
    generate_maze,
    opposite,
    prune_unreachable,
    reachable_mask,
    verify_path_connectivity,
    verify_perfect_maze,
)

__all__ = [
    "DIRECTIONS",
    "DIRECTION_BITS",
    "SCAN_ORDER",
    "LogicalGrid",
    "MazeBits",
    "MazeGenerator",
    "PhysicalGrid",
    "generate_maze",
    "opposite",
    "prune_unreachable",
    "reachable_mask",
    "verify_path_connectivity",
    "verify_perfect_maze",
]
