"""
Breadth-first distance fields and shortest-path reconstruction.

The distance field holds, for every physical cell, the hop count to a goal
cell along PATH cells. It is computed by level-order BFS seeded at the goal,
so each cell's distance is assigned once, at its first and therefore minimal
discovery. A shortest path from any reachable cell is then recovered by
repeatedly stepping to a neighbor whose distance is exactly one less.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from mazepath.geometry.maze_generator import DIRECTIONS, SCAN_ORDER
from mazepath.utils.exceptions import InvalidConfigurationError, UnreachableError, validate_cell
from mazepath.utils.maze_logging import get_logger, log_path_summary

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from mazepath.geometry.maze_generator import PhysicalGrid

logger = get_logger(__name__)

UNREACHED = -1

Cell = tuple[int, int]


@dataclass(frozen=True)
class DistanceField:
    """
    Hop counts to ``goal`` for every physical cell.

    Attributes:
        goal: ``(x, y)`` cell the distances are measured to
        values: ``int64`` array of shape ``(height, width)`` indexed ``[y, x]``;
            ``UNREACHED`` marks walls and cells cut off from the goal
    """

    goal: Cell
    values: NDArray[np.int64]

    @property
    def shape(self) -> tuple[int, int]:
        return tuple(self.values.shape)

    def in_bounds(self, x: int, y: int) -> bool:
        height, width = self.values.shape
        return 0 <= x < width and 0 <= y < height

    def distance_at(self, cell: Cell) -> int:
        """Distance of ``cell`` to the goal, ``UNREACHED`` if none."""
        x, y = cell
        if not self.in_bounds(x, y):
            return UNREACHED
        return int(self.values[y, x])

    def is_reachable(self, cell: Cell) -> bool:
        return self.distance_at(cell) != UNREACHED

    def largest_distance(self) -> int:
        """Largest finite distance in the field (0 for a lone goal)."""
        return int(self.values.max())

    def __getitem__(self, cell: Cell) -> int:
        return self.distance_at(cell)


def compute_distance_field(grid: PhysicalGrid, goal: Cell) -> DistanceField:
    """
    Level-order BFS from ``goal`` over in-bounds PATH cells.

    Args:
        grid: Physical maze
        goal: ``(x, y)`` target cell, must be a PATH cell

    Returns:
        Distance field with ``goal`` at distance 0

    Raises:
        InvalidConfigurationError: If ``goal`` is out of bounds
        UnreachableError: If ``goal`` is a wall
    """
    gx, gy = validate_cell(grid.shape, goal, "goal", component="PathFinder")
    if not grid.is_path((gx, gy)):
        raise UnreachableError(start=(gx, gy), goal=(gx, gy), component="PathFinder", reason="goal is a wall cell")

    height, width = grid.shape
    passable = grid.path_mask()
    values = np.full((height, width), UNREACHED, dtype=np.int64)
    values[gy, gx] = 0

    queue = deque([(gx, gy)])
    while queue:
        x, y = queue.popleft()
        next_distance = values[y, x] + 1
        for direction in SCAN_ORDER:
            dx, dy = DIRECTIONS[direction]
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height and values[ny, nx] == UNREACHED and passable[ny, nx]:
                values[ny, nx] = next_distance
                queue.append((nx, ny))

    return DistanceField(goal=(gx, gy), values=values)


def reconstruct_path(field: DistanceField, start: Cell, goal: Cell | None = None) -> list[Cell]:
    """
    Walk downhill through ``field`` from ``start`` to the field's goal.

    At each step the first neighbor, in scan order (right, down, left, up),
    whose distance is exactly one less is taken, so the same field always
    yields the same path.

    Args:
        field: Distance field computed for the goal
        start: ``(x, y)`` cell to start from
        goal: Optional goal, checked against ``field.goal``

    Returns:
        Cells from ``start`` to the goal inclusive; ``len(path) - 1`` equals
        ``field[start]``

    Raises:
        InvalidConfigurationError: If ``start`` is out of bounds or ``goal``
            is not the field's goal
        UnreachableError: If ``start`` was not reached by the field, or the
            field has no downhill neighbor somewhere along the way
    """
    if goal is not None and tuple(goal) != field.goal:
        raise InvalidConfigurationError(
            "goal", goal, component="PathFinder", reason=f"distance field was computed for {field.goal}"
        )

    x, y = validate_cell(field.shape, start, "start", component="PathFinder")
    remaining = field.distance_at((x, y))
    if remaining == UNREACHED:
        raise UnreachableError(start=(x, y), goal=field.goal, component="PathFinder")

    values = field.values
    path = [(x, y)]
    for _ in range(remaining):
        target = values[y, x] - 1
        for direction in SCAN_ORDER:
            dx, dy = DIRECTIONS[direction]
            nx, ny = x + dx, y + dy
            if field.in_bounds(nx, ny) and values[ny, nx] == target:
                x, y = nx, ny
                break
        else:
            raise UnreachableError(
                start=path[0],
                goal=field.goal,
                component="PathFinder",
                reason=f"no neighbor of {(x, y)} has distance {target}",
            )
        path.append((x, y))

    return path


class PathFinder:
    """
    Shortest-path engine over a physical maze.

    Keeps the most recent distance field so callers can color cells by
    distance without recomputing it.
    """

    def __init__(self):
        self.last_field: DistanceField | None = None

    def compute_distance_field(self, grid: PhysicalGrid, goal: Cell) -> DistanceField:
        self.last_field = compute_distance_field(grid, goal)
        logger.debug(f"Distance field for goal {self.last_field.goal}: max distance {self.last_field.largest_distance()}")
        return self.last_field

    def reconstruct_path(self, field: DistanceField, start: Cell, goal: Cell | None = None) -> list[Cell]:
        path = reconstruct_path(field, start, goal)
        log_path_summary(logger, path[0], path[-1], len(path))
        return path

    def find_path(self, grid: PhysicalGrid, start: Cell, goal: Cell) -> list[Cell]:
        """Distance field for ``goal`` followed by reconstruction from ``start``."""
        field = self.compute_distance_field(grid, goal)
        return self.reconstruct_path(field, start)

