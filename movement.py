from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Dict, Literal, Tuple

if TYPE_CHECKING:
    from maze_game import Cell, Maze

Facing = Literal["up", "down", "left", "right"]

DEFAULT_FACING: Facing = "down"

DIRECTION_VECTORS: Dict[str, Tuple[int, int]] = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


@dataclass(frozen=True)
class MovementState:
    """Where the penguin is and what it has done since the last reset"""
    position: Cell          # Always an open cell
    facing: Facing          # Last requested direction, legal or not
    move_count: int         # Successful moves only
    solved: bool            # Sticky until reset


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single attempt_move call"""
    state: MovementState    # State after the call (same object when ignored)
    moved: bool             # True if position changed
    won: bool               # True only on the call that reached the goal


def reset(maze: Maze) -> MovementState:
    """Fresh state for a newly generated maze."""
    return MovementState(position=maze.start, facing=DEFAULT_FACING, move_count=0, solved=False)


def attempt_move(state: MovementState, maze: Maze, direction: str) -> MoveResult:
    """
    Try to step one cell in `direction`.

    A solved state ignores all input, and so does an unknown direction. Otherwise
    the penguin turns to face `direction`, then moves if the target cell is in
    bounds and open. Reaching the maze end marks the state solved and reports the
    win on this call only.
    """
    if state.solved or direction not in DIRECTION_VECTORS:
        return MoveResult(state, False, False)

    dx, dy = DIRECTION_VECTORS[direction]
    x, y = state.position
    nx, ny = x + dx, y + dy

    if not maze.is_open(nx, ny):
        return MoveResult(replace(state, facing=direction), False, False)

    solved = (nx, ny) == tuple(maze.end)
    new_state = MovementState(
        position=(nx, ny),
        facing=direction,
        move_count=state.move_count + 1,
        solved=solved,
    )
    return MoveResult(new_state, True, solved)
