import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lightning_maze.algo.dfs import RecursiveBacktracker

from lightning_maze.core.grid import Grid, Direction

from lightning_maze.core.analysis import MazeInspector

class TestAnalysis(unittest.TestCase):
    def test_stats_on_generated_maze(self):
        w, h = 20, 20
        grid = Grid(w, h)
        RecursiveBacktracker(grid, seed=42).run_all()

        stats = MazeInspector.calculate_stats(grid)
        self.assertEqual(stats["edges"], w * h - 1)
        self.assertGreater(stats["dead_ends"], 0)
        self.assertEqual(stats["isolated"], 0)
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["junctions"], w * h)
        self.assertTrue(MazeInspector.is_perfect(grid))

    def test_empty_grid_is_not_perfect(self):
        grid = Grid(3, 3)
        stats = MazeInspector.calculate_stats(grid)
        self.assertEqual(stats["isolated"], 9)
        self.assertFalse(MazeInspector.is_perfect(grid))
        self.assertEqual(MazeInspector.reachable(grid, (1, 1)), {(1, 1)})

    def test_single_cell_is_perfect(self):
        self.assertTrue(MazeInspector.is_perfect(Grid(1, 1)))

    def test_loop_is_not_perfect(self):
        grid = Grid(2, 2)
        grid.add_connection((0, 0), Direction.RIGHT)
        grid.add_connection((1, 0), Direction.DOWN)
        grid.add_connection((1, 1), Direction.LEFT)
        self.assertTrue(MazeInspector.is_perfect(grid))

        grid.add_connection((0, 1), Direction.UP)
        self.assertFalse(MazeInspector.is_perfect(grid))
        self.assertEqual(MazeInspector.calculate_stats(grid)["corridors"], 4)

    def test_validate_path(self):
        grid = Grid(3, 1)
        grid.add_connection((0, 0), Direction.RIGHT)
        grid.add_connection((1, 0), Direction.RIGHT)
        self.assertTrue(MazeInspector.validate_path(grid, [(0, 0), (1, 0), (2, 0)]))
        self.assertFalse(MazeInspector.validate_path(grid, [(0, 0), (2, 0)]))
        self.assertFalse(MazeInspector.validate_path(grid, [(0, 0), (-1, 0)]))

if __name__ == '__main__':
    unittest.main()
