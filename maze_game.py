from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Tuple

import numpy as np

# Cell states
OPEN = 0
WALL = 1

Cell = Tuple[int, int]  # (x, y)

# Double-step lattice moves: up, right, down, left
CARVE_DIRS: List[Tuple[int, int]] = [(0, -2), (2, 0), (0, 2), (-2, 0)]


class RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass(frozen=True, eq=False)
class Maze:
    """A generated maze. The grid is read-only once the maze is built."""
    grid: np.ndarray
    start: Cell
    end: Cell
    size: int

    @property
    def width(self) -> int:
        return self.grid.shape[1]

    @property
    def height(self) -> int:
        return self.grid.shape[0]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_open(self, x: int, y: int) -> bool:
        """True if (x, y) is inside the grid and passable."""
        return self.in_bounds(x, y) and self.grid[y, x] == OPEN

    def open_cells(self) -> List[Cell]:
        ys, xs = np.nonzero(self.grid == OPEN)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "size": self.size,
            "grid": self.grid.tolist(),
            "start": self.start,
            "end": self.end,
        }

    @classmethod
    def from_rows(cls, rows: List[str], wall: str = '#') -> Maze:
        """
        Build a maze from text rows ('#' = wall, anything else = open).
        Start and end follow the generator's placement.
        """
        grid = np.array([[WALL if ch == wall else OPEN for ch in row] for row in rows], dtype=np.uint8)
        grid.flags.writeable = False
        height, width = grid.shape
        return cls(grid=grid, start=(1, 1), end=(width - 2, height - 2), size=width)


class MazeGenerator:
    """
    Perfect-maze generator using randomized depth-first backtracking on the
    odd-coordinate lattice, starting from (1, 1).
    """

    class InvalidDimension(ValueError):
        """Width or height is not an odd integer >= 3"""
        def __init__(self, width: Any, height: Any):
            super().__init__(f"Maze dimensions must be odd integers >= 3, got {width}x{height}")
            self.width = width
            self.height = height

    def __init__(self, rng: RandomSource | None = None):
        self.rng = rng if rng is not None else random.Random()

    def _shuffled(self, items: List[Tuple[int, int]]) -> List[Tuple[int, int]]:
        """Fisher-Yates shuffle of a copy of items."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = int(self.rng.random() * (i + 1))
            result[i], result[j] = result[j], result[i]
        return result

    @staticmethod
    def _check_dimension(value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and value >= 3 and value % 2 == 1

    def generate(self, width: int, height: int) -> Maze:
        if not (self._check_dimension(width) and self._check_dimension(height)):
            raise self.InvalidDimension(width, height)

        grid = np.full((height, width), WALL, dtype=np.uint8)
        start = (1, 1)
        end = (width - 2, height - 2)

        # Frames hold their remaining shuffled directions; pop once exhausted
        x, y = start
        grid[y, x] = OPEN
        stack = [(x, y, iter(self._shuffled(CARVE_DIRS)))]

        while stack:
            x, y, dirs = stack[-1]
            for dx, dy in dirs:
                nx, ny = x + dx, y + dy
                if 0 < nx < width - 1 and 0 < ny < height - 1 and grid[ny, nx] == WALL:
                    grid[y + dy // 2, x + dx // 2] = OPEN
                    grid[ny, nx] = OPEN
                    stack.append((nx, ny, iter(self._shuffled(CARVE_DIRS))))
                    break
            else:
                stack.pop()

        grid[end[1], end[0]] = OPEN
        grid.flags.writeable = False

        return Maze(grid=grid, start=start, end=end, size=width)


def generate_maze(width: int, height: int, rng: RandomSource | None = None) -> Maze:
    """Convenience wrapper around MazeGenerator(rng).generate(width, height)."""
    return MazeGenerator(rng).generate(width, height)
