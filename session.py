from __future__ import annotations

import random
from typing import Optional

import difficulty
import movement
from maze_game import Maze, MazeGenerator, RandomSource
from movement import MovementState

WIN_MESSAGE = "You caught the fish!"
EASIER_MESSAGE = "Here's an easier one!"
EASIEST_MESSAGE = "This is the easiest maze!"


class GameSession:
    """
    One player's game: the current level, its maze and the penguin's movement
    state. Owns its own generator and random source.
    """

    def __init__(self, level: int = difficulty.DEFAULT_LEVEL, rng: Optional[RandomSource] = None):
        self.generator = MazeGenerator(rng if rng is not None else random.Random())
        self.level = difficulty.clamp_level(level)
        self.message = ""
        self.maze: Maze
        self.state: MovementState
        self.new_game()

    @property
    def solved(self) -> bool:
        return self.state.solved

    def regenerate(self, width: int, height: Optional[int] = None) -> Maze:
        """
        Replace the maze with a fresh one of the given size and reset movement.
        Raises MazeGenerator.InvalidDimension and leaves the session untouched
        on a bad size.
        """
        maze = self.generator.generate(width, width if height is None else height)
        self.maze = maze
        self.state = movement.reset(maze)
        self.message = ""
        return maze

    def new_game(self) -> Maze:
        size = difficulty.size_for(self.level)
        return self.regenerate(size, size)

    def attempt_move(self, direction: str) -> bool:
        """Apply one direction intent. Returns True only on the winning move."""
        result = movement.attempt_move(self.state, self.maze, direction)
        self.state = result.state
        if result.won:
            self.message = WIN_MESSAGE
        return result.won

    def change_difficulty(self, delta: int) -> Maze:
        self.level = difficulty.change(self.level, delta)
        return self.new_game()

    def next_level(self) -> Maze:
        return self.change_difficulty(1)

    def give_up(self) -> Maze:
        previous = self.level
        maze = self.change_difficulty(-1)
        self.message = EASIER_MESSAGE if previous > difficulty.MIN_LEVEL else EASIEST_MESSAGE
        return maze
