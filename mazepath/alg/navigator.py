"""
Agent that walks shortest paths toward a changing goal.

The navigator owns its position, its goal and the path between them. Each
``advance()`` either moves one cell along the path or, once the goal is
reached, draws a new goal and asks the path finder for a fresh route.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from mazepath.alg.path_finder import PathFinder
from mazepath.utils.exceptions import InvalidConfigurationError, validate_cell
from mazepath.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from mazepath.alg.path_finder import Cell, DistanceField
    from mazepath.core.random_source import XorShiftRandom
    from mazepath.geometry.maze_generator import PhysicalGrid

logger = get_logger(__name__)


class Navigator:
    """
    Position, goal and path over one physical maze.

    Invariants:
    - ``position`` is always a PATH cell and always ``path[0]``
    - ``goal`` is always ``path[-1]``
    - with a single PATH cell, position and goal coincide forever

    Example:
        >>> rng = XorShiftRandom(7)
        >>> _, physical = generate_maze(10, 10, rng, mutation_rate=50)
        >>> navigator = Navigator(physical, rng)
        >>> for _ in range(100):
        ...     navigator.advance()
    """

    def __init__(
        self,
        grid: PhysicalGrid,
        rng: XorShiftRandom,
        position: Cell | None = None,
        goal: Cell | None = None,
        path_finder: PathFinder | None = None,
    ):
        """
        Args:
            grid: Physical maze to walk
            rng: Random stream for initial placement and new goals
            position: Starting PATH cell; drawn at random when omitted
            goal: First goal PATH cell; drawn at random (distinct from the
                position when possible) when omitted
            path_finder: Shared path finder, a new one by default

        Raises:
            InvalidConfigurationError: If the grid has no PATH cell, or a
                given position/goal is out of bounds or a wall
        """
        self.grid = grid
        self.rng = rng
        self.path_finder = path_finder or PathFinder()
        self.goals_reached = 0

        self._path_count = grid.path_count()
        if self._path_count == 0:
            raise InvalidConfigurationError(
                "grid", f"{grid.width}x{grid.height}", component="Navigator", reason="maze has no PATH cell"
            )

        self._position = self._checked_cell(position, "position") if position is not None else self.random_path_cell()
        if goal is not None:
            self._goal = self._checked_cell(goal, "goal")
        else:
            self._goal = self.random_path_cell(exclude=self._position)

        self._field: DistanceField | None = None
        self._path: deque[Cell] = deque()
        self._path_origin = self._position
        self._rebuild_path()

    def _checked_cell(self, cell: Cell, name: str) -> Cell:
        checked = validate_cell(self.grid.shape, cell, name, component="Navigator")
        if not self.grid.is_path(checked):
            raise InvalidConfigurationError(name, cell, component="Navigator", reason="cell is a wall")
        return checked

    @property
    def position(self) -> Cell:
        return self._position

    @property
    def goal(self) -> Cell:
        return self._goal

    @property
    def path(self) -> tuple[Cell, ...]:
        """Remaining path, ``position`` first and ``goal`` last."""
        return tuple(self._path)

    @property
    def distance_field(self) -> DistanceField | None:
        return self._field

    @property
    def remaining_steps(self) -> int:
        return len(self._path) - 1

    @property
    def largest_distance(self) -> int:
        """Length in steps of the route as it was when last planned."""
        if self._field is None:
            return 0
        return self._field.distance_at(self._path_origin)

    def random_path_cell(self, exclude: Cell | None = None) -> Cell:
        """
        Rejection-sample a PATH cell uniformly, skipping ``exclude``.

        When ``exclude`` is the only PATH cell it is returned, since no other
        cell can ever be drawn.
        """
        if exclude is not None and self._path_count == 1 and self.grid.is_path(exclude):
            return tuple(exclude)

        width, height = self.grid.width, self.grid.height
        while True:
            cell = (self.rng.randrange(width), self.rng.randrange(height))
            if cell != exclude and self.grid.is_path(cell):
                return cell

    def advance(self) -> None:
        """
        Move one cell toward the goal, or pick a new goal once it is reached.

        A no-op in a maze with a single PATH cell.
        """
        if len(self._path) > 1:
            self._path.popleft()
            self._position = self._path[0]
            return

        if self._path_count <= 1:
            return

        self.goals_reached += 1
        self._goal = self.random_path_cell(exclude=self._position)
        logger.debug(f"Goal {self.goals_reached} reached at {self._position}, next goal {self._goal}")
        self._rebuild_path()

    def _rebuild_path(self) -> None:
        self._field = self.path_finder.compute_distance_field(self.grid, self._goal)
        self._path = deque(self.path_finder.reconstruct_path(self._field, self._position))
        self._path_origin = self._position

    def __repr__(self) -> str:
        return f"Navigator(position={self._position}, goal={self._goal}, remaining_steps={self.remaining_steps})"
