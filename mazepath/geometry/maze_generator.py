"""
Perfect Maze Generation with Optional Mutation

Builds a logical spanning tree over a ``width x height`` grid with the
recursive backtracking (iterative depth-first) algorithm, then expands it into
a ``2*width x 2*height`` physical grid of PATH and wall cells. An optional
mutation pass turns random walls into PATH cells, adding loops and shortcuts
without ever removing a passage. Opened cells that end up cut off from the
tree are closed again, so every PATH cell stays reachable.

Mathematical Foundation:
A perfect maze is a spanning tree of the grid graph:
- Connectivity: |V| vertices connected by |V|-1 edges
- Acyclicity: No loops in the graph structure
- Uniqueness: Exactly one path between any two vertices

Physical layout of one logical node ``(x, y)``::

    (2x, 2y+1)  (2x+1, 2y+1)     UP passage   mutation only
    (2x, 2y)    (2x+1, 2y)       node center  RIGHT passage

DOWN and LEFT passages are written by the neighbor's UP and RIGHT bits.

Reference: Jamis Buck, "Mazes for Programmers" (2015)
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntFlag
from typing import TYPE_CHECKING

import numpy as np

from mazepath.utils.exceptions import InvalidConfigurationError, validate_dimensions
from mazepath.utils.maze_logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from numpy.typing import NDArray

    from mazepath.core.random_source import XorShiftRandom

logger = get_logger(__name__)


class MazeBits(IntFlag):
    """Per-cell flags shared by the logical and the physical grid."""

    UP = 0x01
    LEFT = 0x02
    DOWN = 0x04
    RIGHT = 0x08
    VISITED = 0x10  # transient: generation on the logical grid, solvers on the physical one
    PATH = 0x20


# Direction index i has bit (1 << i); its opposite is (i + 2) % 4
DIRECTIONS: tuple[tuple[int, int], ...] = ((0, 1), (-1, 0), (0, -1), (1, 0))
DIRECTION_BITS: tuple[MazeBits, ...] = (MazeBits.UP, MazeBits.LEFT, MazeBits.DOWN, MazeBits.RIGHT)

# Neighbor scan order used everywhere a deterministic order matters
SCAN_ORDER: tuple[int, ...] = (3, 2, 1, 0)


def opposite(direction: int) -> int:
    """Index of the direction pointing back."""
    return (direction + 2) % 4


@dataclass
class LogicalGrid:
    """
    Undoubled ``width x height`` grid of connectivity masks.

    Attributes:
        width: Number of logical columns
        height: Number of logical rows
        cells: ``uint8`` array of shape ``(height, width)`` indexed ``[y, x]``
    """

    width: int
    height: int
    cells: NDArray[np.uint8]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def has_passage(self, x: int, y: int, direction: int) -> bool:
        """Whether node ``(x, y)`` connects to its neighbor in ``direction``."""
        return bool(self.cells[y, x] & DIRECTION_BITS[direction])

    def neighbors(self, x: int, y: int) -> list[tuple[int, int]]:
        """Logical neighbors connected to ``(x, y)`` by a passage."""
        connected = []
        for direction in SCAN_ORDER:
            if self.has_passage(x, y, direction):
                dx, dy = DIRECTIONS[direction]
                connected.append((x + dx, y + dy))
        return connected

    def edge_count(self) -> int:
        """Number of passages; each is counted once through its UP or RIGHT bit."""
        up = np.count_nonzero(self.cells & np.uint8(MazeBits.UP))
        right = np.count_nonzero(self.cells & np.uint8(MazeBits.RIGHT))
        return int(up + right)


@dataclass
class PhysicalGrid:
    """
    Doubled ``2*width x 2*height`` grid of PATH and wall cells.

    Attributes:
        cells: ``uint8`` array of shape ``(2*height, 2*width)`` indexed ``[y, x]``
    """

    cells: NDArray[np.uint8]

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.height, self.width)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_path(self, cell: tuple[int, int]) -> bool:
        """Whether ``cell`` is in bounds and passable."""
        x, y = cell
        return self.in_bounds(x, y) and bool(self.cells[y, x] & MazeBits.PATH)

    def path_mask(self) -> NDArray[np.bool_]:
        """Boolean array, True on PATH cells."""
        return (self.cells & np.uint8(MazeBits.PATH)) != 0

    def path_count(self) -> int:
        return int(np.count_nonzero(self.path_mask()))

    def path_cells(self) -> list[tuple[int, int]]:
        """All PATH cells as ``(x, y)`` tuples, row by row."""
        ys, xs = np.nonzero(self.path_mask())
        return [(int(x), int(y)) for x, y in zip(xs, ys, strict=True)]

    def neighbors(self, x: int, y: int) -> list[tuple[int, int]]:
        """In-bounds PATH cells adjacent to ``(x, y)``, in scan order."""
        adjacent = []
        for direction in SCAN_ORDER:
            dx, dy = DIRECTIONS[direction]
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny) and self.cells[ny, nx] & MazeBits.PATH:
                adjacent.append((nx, ny))
        return adjacent

    def to_numpy_array(self) -> NDArray[np.int32]:
        """
        Convert to the conventional obstacle array.

        Returns:
            Numpy array where 1 = wall, 0 = passage
        """
        return (~self.path_mask()).astype(np.int32)

    def to_ascii(
        self,
        path: Iterable[tuple[int, int]] | None = None,
        position: tuple[int, int] | None = None,
        goal: tuple[int, int] | None = None,
        wall: str = "#",
        passage: str = " ",
    ) -> str:
        """
        Plain-text dump, highest ``y`` first so that UP points up.

        Path cells are drawn as ``*``, the position as ``@`` and the goal as ``G``.
        """
        rows = [[passage if flag else wall for flag in row] for row in self.path_mask()]
        for x, y in path or ():
            rows[y][x] = "*"
        if goal is not None:
            rows[goal[1]][goal[0]] = "G"
        if position is not None:
            rows[position[1]][position[0]] = "@"
        return "\n".join("".join(row) for row in reversed(rows))


class MazeGenerator:
    """
    Recursive backtracking maze generator with a mutation post-pass.

    Every random number comes from the ``XorShiftRandom`` passed in, so equal
    seeds give bit-identical grids.

    Example:
        >>> rng = XorShiftRandom(12345)
        >>> logical, physical = MazeGenerator.generate(3, 3, rng, mutation_rate=0)
        >>> logical.edge_count()
        8
    """

    def __init__(self, width: int, height: int, mutation_rate: int | None = None):
        """
        Args:
            width: Logical width (>= 1)
            height: Logical height (>= 1)
            mutation_rate: Each wall becomes PATH with probability
                ``1 / mutation_rate``; ``None`` or 0 disables mutation

        Raises:
            InvalidConfigurationError: On non-positive dimensions or a negative rate
        """
        validate_dimensions(width, height, component="MazeGenerator")
        if mutation_rate is not None and (isinstance(mutation_rate, bool) or mutation_rate < 0):
            raise InvalidConfigurationError(
                "mutation_rate", mutation_rate, valid_range=(0, None), component="MazeGenerator"
            )

        self.width = width
        self.height = height
        self.mutation_rate = mutation_rate or 0

    @classmethod
    def generate(
        cls,
        width: int,
        height: int,
        rng: XorShiftRandom,
        mutation_rate: int | None = None,
    ) -> tuple[LogicalGrid, PhysicalGrid]:
        """
        Generate a maze.

        Args:
            width: Logical width (>= 1)
            height: Logical height (>= 1)
            rng: Random stream used for carving and mutation
            mutation_rate: See ``__init__``

        Returns:
            ``(logical, physical)`` grids
        """
        return cls(width, height, mutation_rate).run(rng)

    def run(self, rng: XorShiftRandom) -> tuple[LogicalGrid, PhysicalGrid]:
        logger.debug(
            f"Generating {self.width}x{self.height} maze (mutation_rate={self.mutation_rate}, rng state={rng.state})"
        )
        logical = self._recursive_backtracking(rng)
        physical = self._expand(logical)
        if self.mutation_rate > 0:
            added = self._mutate(physical, rng)
            logger.debug(f"Mutation opened {added} walls")
        return logical, physical

    def _recursive_backtracking(self, rng: XorShiftRandom) -> LogicalGrid:
        """
        Iterative depth-first carving from the grid center.

        Algorithm:
        1. Push the center node, mark it visited
        2. While the stack is non-empty:
           - Collect unvisited in-bounds neighbors of the top node
           - None: pop (backtrack)
           - Otherwise pick one with the rng, set the reciprocal direction
             bits, mark it visited and push it
        3. Clear the VISITED flags

        Each iteration marks a node or pops one, so the loop runs at most
        ``2 * width * height`` times.
        """
        width, height = self.width, self.height
        attrs = [0] * (width * height)

        start = (width // 2, height // 2)
        attrs[start[1] * width + start[0]] |= MazeBits.VISITED
        stack = [start]

        while stack:
            x, y = stack[-1]

            candidates = []
            for direction in SCAN_ORDER:
                dx, dy = DIRECTIONS[direction]
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and 0 <= ny < height and not attrs[ny * width + nx] & MazeBits.VISITED:
                    candidates.append(direction)

            if not candidates:
                stack.pop()
                continue

            direction = candidates[rng.randrange(len(candidates))]
            dx, dy = DIRECTIONS[direction]
            nx, ny = x + dx, y + dy

            attrs[y * width + x] |= DIRECTION_BITS[direction]
            attrs[ny * width + nx] |= DIRECTION_BITS[opposite(direction)] | MazeBits.VISITED
            stack.append((nx, ny))

        cells = np.array(attrs, dtype=np.uint8).reshape(height, width)
        cells &= np.uint8(0xFF ^ MazeBits.VISITED)
        return LogicalGrid(width=width, height=height, cells=cells)

    @staticmethod
    def _expand(logical: LogicalGrid) -> PhysicalGrid:
        """Map each logical node onto its 2x2 physical block."""
        cells = np.zeros((2 * logical.height, 2 * logical.width), dtype=np.uint8)

        cells[0::2, 0::2] = MazeBits.PATH
        cells[1::2, 0::2][(logical.cells & np.uint8(MazeBits.UP)) != 0] |= np.uint8(MazeBits.PATH)
        cells[0::2, 1::2][(logical.cells & np.uint8(MazeBits.RIGHT)) != 0] |= np.uint8(MazeBits.PATH)

        return PhysicalGrid(cells=cells)

    def _mutate(self, physical: PhysicalGrid, rng: XorShiftRandom) -> int:
        """
        Open each cell with probability ``1 / mutation_rate``.

        One draw per cell, highest flat index first. A block corner
        ``(2x+1, 2y+1)`` only touches passage cells, so it can open with all
        four neighbors still walls; such cells are closed again afterwards.
        Cells of the carved tree are never touched.

        Returns:
            Number of walls that became PATH and stayed connected
        """
        flat = physical.cells.reshape(-1)
        path_bit = np.uint8(MazeBits.PATH)
        rate = self.mutation_rate
        added = 0
        for index in range(flat.size - 1, -1, -1):
            if rng.randrange(rate) == 0:
                if not flat[index] & path_bit:
                    added += 1
                flat[index] |= path_bit

        removed = prune_unreachable(physical)
        if removed:
            logger.debug(f"Closed {removed} mutated cells cut off from the maze")
        return added - removed


def verify_perfect_maze(grid: LogicalGrid) -> dict:
    """
    Verify that a logical grid is a perfect maze (fully connected, no loops).

    Args:
        grid: Logical grid to verify

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: Connectivity check
        - is_no_loops: Acyclicity check
        - visited_cells: Number of reachable nodes
        - total_cells: Total number of nodes
        - passage_count: Number of passages
        - expected_passages: Expected passages for perfect maze
    """
    total_cells = grid.width * grid.height

    seen = {(0, 0)}
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        for neighbor in grid.neighbors(x, y):
            if grid.in_bounds(*neighbor) and neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)

    visited_count = len(seen)
    is_connected = visited_count == total_cells

    passage_count = grid.edge_count()
    expected_passages = total_cells - 1
    is_no_loops = passage_count == expected_passages

    return {
        "is_perfect": is_connected and is_no_loops,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "visited_cells": visited_count,
        "total_cells": total_cells,
        "passage_count": passage_count,
        "expected_passages": expected_passages,
    }


def reachable_mask(grid: PhysicalGrid, start: tuple[int, int]) -> NDArray[np.bool_]:
    """Boolean array, True on PATH cells connected to ``start`` (itself a PATH cell)."""
    reached = np.zeros(grid.shape, dtype=bool)
    if not grid.is_path(start):
        return reached

    reached[start[1], start[0]] = True
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for nx, ny in grid.neighbors(x, y):
            if not reached[ny, nx]:
                reached[ny, nx] = True
                queue.append((nx, ny))
    return reached


def prune_unreachable(grid: PhysicalGrid, start: tuple[int, int] = (0, 0)) -> int:
    """
    Clear PATH on every cell not connected to ``start``.

    ``(0, 0)`` is the center of logical node ``(0, 0)``, which the carved
    tree always reaches.

    Returns:
        Number of cells closed
    """
    cut_off = grid.path_mask() & ~reachable_mask(grid, start)
    grid.cells[cut_off] &= np.uint8(0xFF ^ MazeBits.PATH)
    return int(np.count_nonzero(cut_off))


def verify_path_connectivity(grid: PhysicalGrid) -> bool:
    """Whether every PATH cell is reachable from every other PATH cell."""
    cells = grid.path_cells()
    if len(cells) <= 1:
        return True

    return int(np.count_nonzero(reachable_mask(grid, cells[0]))) == len(cells)


def generate_maze(
    width: int,
    height: int,
    rng: XorShiftRandom,
    mutation_rate: int | None = None,
) -> tuple[LogicalGrid, PhysicalGrid]:
    """
    High-level function to generate a maze.

    The logical grid is checked to be perfect before it is returned.

    Example:
        >>> logical, physical = generate_maze(20, 10, XorShiftRandom(42), mutation_rate=100)
        >>> physical.shape
        (20, 40)
    """
    logical, physical = MazeGenerator.generate(width, height, rng, mutation_rate)

    verification = verify_perfect_maze(logical)
    if not verification["is_perfect"]:
        raise RuntimeError(f"Generated maze is not perfect: {verification}")

    return logical, physical
