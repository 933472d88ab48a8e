from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Set

import numpy as np

from maze_game import OPEN, WALL

if TYPE_CHECKING:
    from maze_game import Cell, Maze

NEIGHBOURS = [(0, -1), (1, 0), (0, 1), (-1, 0)]


@dataclass
class MazeReport:
    """Structural properties of one generated maze"""
    size: int
    open_cells: int
    passages: int          # Edges between orthogonally adjacent open cells
    dead_ends: int
    connected: bool
    perfect: bool          # Connected tree: passages == open_cells - 1
    border_intact: bool

    @property
    def ok(self) -> bool:
        return self.connected and self.perfect and self.border_intact


def reachable_cells(maze: Maze) -> Set[Cell]:
    """Flood fill over open cells from the maze start."""
    if not maze.is_open(*maze.start):
        return set()
    seen = {tuple(maze.start)}
    queue = deque([tuple(maze.start)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in NEIGHBOURS:
            nxt = (x + dx, y + dy)
            if nxt not in seen and maze.is_open(*nxt):
                seen.add(nxt)
                queue.append(nxt)
    return seen


def is_connected(maze: Maze) -> bool:
    return len(reachable_cells(maze)) == int(np.count_nonzero(maze.grid == OPEN))


def count_passages(maze: Maze) -> int:
    open_mask = maze.grid == OPEN
    horizontal = np.count_nonzero(open_mask[:, :-1] & open_mask[:, 1:])
    vertical = np.count_nonzero(open_mask[:-1, :] & open_mask[1:, :])
    return int(horizontal + vertical)


def is_perfect(maze: Maze) -> bool:
    """A connected open-cell graph with |V| - 1 edges is a tree."""
    return is_connected(maze) and count_passages(maze) == int(np.count_nonzero(maze.grid == OPEN)) - 1


def border_intact(maze: Maze) -> bool:
    grid = maze.grid
    return bool(
        np.all(grid[0, :] == WALL) and np.all(grid[-1, :] == WALL)
        and np.all(grid[:, 0] == WALL) and np.all(grid[:, -1] == WALL)
    )


def dead_ends(maze: Maze) -> List[Cell]:
    """Open cells with exactly one open neighbour."""
    result = []
    for x, y in maze.open_cells():
        exits = sum(1 for dx, dy in NEIGHBOURS if maze.is_open(x + dx, y + dy))
        if exits == 1:
            result.append((x, y))
    return result


def check_maze(maze: Maze) -> MazeReport:
    open_count = int(np.count_nonzero(maze.grid == OPEN))
    passages = count_passages(maze)
    connected = is_connected(maze)
    return MazeReport(
        size=maze.size,
        open_cells=open_count,
        passages=passages,
        dead_ends=len(dead_ends(maze)),
        connected=connected,
        perfect=connected and passages == open_count - 1,
        border_intact=border_intact(maze),
    )
