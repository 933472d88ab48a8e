import random
import unittest

import movement
from maze_game import Maze, generate_maze
from movement import DIRECTION_VECTORS, MovementState, attempt_move, reset

# Single corridor from (1, 1) to the end at (3, 3)
CORRIDOR = Maze.from_rows([
    "#####",
    "#   #",
    "### #",
    "#   #",
    "#####",
])

WINNING_PATH = ["right", "right", "down", "down"]


class TestMovement(unittest.TestCase):

    def setUp(self):
        self.state = reset(CORRIDOR)

    def test_reset(self):
        self.assertEqual(self.state, MovementState((1, 1), "down", 0, False))

    def test_legal_move(self):
        result = attempt_move(self.state, CORRIDOR, "right")
        self.assertTrue(result.moved)
        self.assertFalse(result.won)
        self.assertEqual(result.state, MovementState((2, 1), "right", 1, False))

    def test_blocked_move_turns_but_stays(self):
        result = attempt_move(self.state, CORRIDOR, "down")
        self.assertFalse(result.moved)
        self.assertEqual(result.state.position, (1, 1))
        self.assertEqual(result.state.move_count, 0)
        self.assertEqual(result.state.facing, "down")

        result = attempt_move(result.state, CORRIDOR, "left")
        self.assertEqual(result.state, MovementState((1, 1), "left", 0, False))

    def test_out_of_bounds_is_blocked(self):
        # Open cell on the edge of a grid with no border
        maze = Maze.from_rows(["   ", "   ", "   "])
        state = MovementState((0, 0), "down", 0, False)
        for direction in ("up", "left"):
            result = attempt_move(state, maze, direction)
            self.assertFalse(result.moved)
            self.assertEqual(result.state.position, (0, 0))
            self.assertEqual(result.state.facing, direction)

    def test_unknown_direction_is_ignored(self):
        moved = attempt_move(self.state, CORRIDOR, "right").state
        for direction in ("north", "", "UP", None):
            result = attempt_move(moved, CORRIDOR, direction)
            self.assertIs(result.state, moved)
            self.assertFalse(result.moved)
            self.assertFalse(result.won)

    def test_win_fires_once(self):
        state = self.state
        wins = []
        for direction in WINNING_PATH:
            result = attempt_move(state, CORRIDOR, direction)
            state = result.state
            wins.append(result.won)
        self.assertEqual(wins, [False, False, False, True])
        self.assertEqual(state, MovementState((3, 3), "down", 4, True))

        for direction in DIRECTION_VECTORS:
            result = attempt_move(state, CORRIDOR, direction)
            self.assertFalse(result.won)
            self.assertFalse(result.moved)
            self.assertIs(result.state, state)

    def test_reset_after_win(self):
        state = self.state
        for direction in WINNING_PATH:
            state = attempt_move(state, CORRIDOR, direction).state
        self.assertTrue(state.solved)
        self.assertEqual(reset(CORRIDOR), MovementState((1, 1), "down", 0, False))

    def test_legality_matches_grid(self):
        """Position changes exactly when the target cell is open."""
        maze = generate_maze(9, 9, random.Random(4))
        rng = random.Random(8)
        state = reset(maze)
        for _ in range(300):
            direction = rng.choice(list(DIRECTION_VECTORS))
            dx, dy = DIRECTION_VECTORS[direction]
            x, y = state.position
            target_open = maze.is_open(x + dx, y + dy)
            result = attempt_move(state, maze, direction)
            if state.solved:
                self.assertIs(result.state, state)
                continue
            self.assertEqual(result.moved, target_open)
            self.assertEqual(result.state.facing, direction)
            if target_open:
                self.assertEqual(result.state.position, (x + dx, y + dy))
                self.assertEqual(result.state.move_count, state.move_count + 1)
            else:
                self.assertEqual(result.state.position, state.position)
                self.assertEqual(result.state.move_count, state.move_count)
            self.assertTrue(maze.is_open(*result.state.position))
            state = result.state

    def test_seven_by_seven_first_move(self):
        maze = generate_maze(7, 7, random.Random(0))
        result = attempt_move(reset(maze), maze, "right")
        if maze.is_open(2, 1):
            self.assertEqual(result.state, MovementState((2, 1), "right", 1, False))
        else:
            self.assertEqual(result.state, MovementState((1, 1), "right", 0, False))

    def test_default_facing(self):
        self.assertEqual(movement.DEFAULT_FACING, "down")


if __name__ == '__main__':
    unittest.main()
