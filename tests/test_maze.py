import unittest
import sys
import os
import random

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lightning_maze.core.maze import Maze, DEFAULT_WIDTH, DEFAULT_HEIGHT
from lightning_maze.core.errors import OutOfBounds, InvalidDimensions
from lightning_maze.core.analysis import MazeInspector

class TestMaze(unittest.TestCase):
    def test_defaults(self):
        maze = Maze(seed=1)
        self.assertEqual((maze.width, maze.height), (DEFAULT_WIDTH, DEFAULT_HEIGHT))
        self.assertEqual(maze.start.y, 0)
        self.assertEqual(maze.end.y, DEFAULT_HEIGHT - 1)
        self.assertTrue(MazeInspector.is_perfect(maze.grid))

    def test_path_runs_top_to_bottom(self):
        maze = Maze(15, 12, seed=2024)
        self.assertEqual(maze.path[0], maze.start)
        self.assertEqual(maze.path[-1], maze.end)
        self.assertTrue(MazeInspector.validate_path(maze.grid, maze.path))
        self.assertTrue(maze.on_path(maze.start))
        self.assertTrue(all(maze.on_path(c) for c in maze.path))

    def test_seeded_reproducible(self):
        a = Maze(10, 10, seed=77)
        b = Maze(10, 10, rng=random.Random(77))
        self.assertEqual(a.start, b.start)
        self.assertEqual(a.end, b.end)
        self.assertEqual(a.grid.cells.tobytes(), b.grid.cells.tobytes())
        self.assertEqual(a.path, b.path)

    def test_fixed_columns(self):
        maze = Maze(5, 3, seed=0, start_x=4, end_x=0)
        self.assertEqual(maze.start, (4, 0))
        self.assertEqual(maze.end, (0, 2))
        self.assertEqual(maze.path[-1], (0, 2))

    def test_single_row(self):
        maze = Maze(4, 1, seed=0, start_x=2, end_x=2)
        self.assertEqual(maze.path, [(2, 0)])

    def test_bad_arguments(self):
        with self.assertRaises(InvalidDimensions):
            Maze(0, 10)
        with self.assertRaises(OutOfBounds):
            Maze(5, 5, start_x=5)

    def test_regenerate_stays_perfect(self):
        maze = Maze(8, 8, seed=3)
        first_path = list(maze.path)
        path = maze.generate()

        self.assertEqual(maze.grid.edge_count(), 63)
        self.assertTrue(MazeInspector.is_perfect(maze.grid))
        self.assertIs(path, maze.path)
        self.assertEqual(maze.path[0], maze.start)
        self.assertEqual(maze.path[-1], maze.end)
        self.assertTrue(MazeInspector.validate_path(maze.grid, maze.path))
        self.assertEqual(first_path[0], maze.path[0])

    def test_on_path_tracks_latest_solve(self):
        maze = Maze(10, 10, seed=5)
        maze.generate()
        path_cells = set(maze.path)
        for c in maze.grid.coords():
            self.assertEqual(maze.on_path(c), c in path_cells)
        self.assertFalse(hasattr(maze, "seed"))

if __name__ == '__main__':
    unittest.main()
