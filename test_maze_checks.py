import random
import unittest

from maze_checks import (
    border_intact,
    check_maze,
    count_passages,
    dead_ends,
    is_connected,
    is_perfect,
    reachable_cells,
)
from maze_game import Maze, generate_maze

CORRIDOR = Maze.from_rows([
    "#####",
    "#   #",
    "### #",
    "#   #",
    "#####",
])

ROOM = Maze.from_rows([
    "#####",
    "#   #",
    "#   #",
    "#   #",
    "#####",
])

SPLIT = Maze.from_rows([
    "#####",
    "#   #",
    "#####",
    "#   #",
    "#####",
])

LEAKY = Maze.from_rows([
    "#####",
    "#   #",
    "### #",
    "#    ",
    "#####",
])


class TestMazeChecks(unittest.TestCase):

    def test_corridor_is_perfect(self):
        report = check_maze(CORRIDOR)
        self.assertEqual(report.open_cells, 7)
        self.assertEqual(report.passages, 6)
        self.assertEqual(report.dead_ends, 2)
        self.assertTrue(report.connected)
        self.assertTrue(report.perfect)
        self.assertTrue(report.border_intact)
        self.assertTrue(report.ok)

    def test_room_has_cycles(self):
        self.assertTrue(is_connected(ROOM))
        self.assertEqual(count_passages(ROOM), 12)
        self.assertFalse(is_perfect(ROOM))
        self.assertFalse(check_maze(ROOM).ok)

    def test_split_is_disconnected(self):
        self.assertEqual(reachable_cells(SPLIT), {(1, 1), (2, 1), (3, 1)})
        self.assertFalse(is_connected(SPLIT))
        self.assertFalse(is_perfect(SPLIT))

    def test_open_border_detected(self):
        self.assertFalse(border_intact(LEAKY))
        self.assertTrue(border_intact(CORRIDOR))
        self.assertFalse(check_maze(LEAKY).ok)

    def test_dead_ends(self):
        self.assertEqual(sorted(dead_ends(CORRIDOR)), [(1, 1), (1, 3)])

    def test_generated_mazes_pass(self):
        for seed in range(20):
            maze = generate_maze(17, 17, random.Random(seed))
            self.assertTrue(check_maze(maze).ok, f"seed={seed}")


if __name__ == '__main__':
    unittest.main()
