"""
One maze and the navigator walking it.

A session rebuilds everything on a new-maze event: fresh grids from the
configured dimensions, then a navigator at a random PATH cell heading for a
random goal. Between new-maze events it only forwards ``advance()`` calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mazepath.alg.navigator import Navigator
from mazepath.alg.path_finder import PathFinder
from mazepath.config.core import MazeConfig, SessionConfig
from mazepath.core.random_source import XorShiftRandom
from mazepath.geometry.maze_generator import MazeGenerator
from mazepath.utils.maze_logging import LoggedOperation, get_logger, log_maze_summary

if TYPE_CHECKING:
    from mazepath.geometry.maze_generator import LogicalGrid, PhysicalGrid

logger = get_logger(__name__)


class MazeSession:
    """
    Owner of the generate -> solve -> walk chain.

    Example:
        >>> session = MazeSession(SessionConfig(maze={"width": 30, "height": 15, "seed": 99}))
        >>> session.new_maze()
        >>> goals = session.step(500)
    """

    def __init__(self, config: SessionConfig | MazeConfig | None = None, rng: XorShiftRandom | None = None):
        """
        Args:
            config: Session configuration, or just the maze part of one
            rng: Random stream; by default one seeded from ``config.maze.seed``
        """
        if config is None:
            config = SessionConfig()
        elif isinstance(config, MazeConfig):
            config = SessionConfig(maze=config)

        self.config = config
        self.rng = rng if rng is not None else XorShiftRandom(config.maze.seed)
        self.path_finder = PathFinder()
        self.mazes_generated = 0

        self._logical: LogicalGrid | None = None
        self._physical: PhysicalGrid | None = None
        self._navigator: Navigator | None = None

    @property
    def logical(self) -> LogicalGrid | None:
        return self._logical

    @property
    def physical(self) -> PhysicalGrid | None:
        return self._physical

    @property
    def navigator(self) -> Navigator:
        if self._navigator is None:
            self.new_maze()
        return self._navigator

    @property
    def largest_distance(self) -> int:
        """Planned route length, for scaling distance colors."""
        return self.navigator.largest_distance

    def new_maze(self) -> Navigator:
        """Regenerate the maze and place a fresh navigator on it."""
        maze = self.config.maze
        with LoggedOperation(logger, f"maze generation {maze.width}x{maze.height}"):
            self._logical, self._physical = MazeGenerator.generate(
                maze.width, maze.height, self.rng, maze.mutation_rate
            )
        self.mazes_generated += 1
        log_maze_summary(logger, self._logical, self._physical)

        self._navigator = Navigator(self._physical, self.rng, path_finder=self.path_finder)
        logger.debug(f"Navigator placed at {self._navigator.position}, goal {self._navigator.goal}")
        return self._navigator

    def step(self, n: int = 1) -> int:
        """
        Advance the navigator ``n`` times.

        Returns:
            Number of goals reached during these steps
        """
        navigator = self.navigator
        before = navigator.goals_reached
        for _ in range(n):
            navigator.advance()
        reached = navigator.goals_reached - before
        if reached:
            logger.info(f"{reached} goals reached in {n} steps (total {navigator.goals_reached})")
        return reached

    def walk(self) -> int:
        """Advance ``config.navigator.max_steps`` times."""
        return self.step(self.config.navigator.max_steps)
