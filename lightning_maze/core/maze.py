import logging
import random
from typing import List, Optional, Set, Tuple

from lightning_maze.core.grid import Coord, Grid
from lightning_maze.algo.dfs import RecursiveBacktracker
from lightning_maze.algo.solvers import DepthFirstSolver

logger = logging.getLogger(__name__)

# Cells across and down, sized for an A-series portrait sheet
DEFAULT_WIDTH = 32
DEFAULT_HEIGHT = 45


class Maze:
    """
    A generated and solved maze.

    Start sits somewhere on the top row and end somewhere on the bottom row,
    both drawn from the rng unless given. The maze is carved outward from
    start, then the unique route from start to end is stored in path.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 seed: int = None, rng: Optional[random.Random] = None,
                 start_x: Optional[int] = None, end_x: Optional[int] = None):
        self.rng = rng if rng is not None else random.Random(seed)
        self.grid = Grid(width, height)

        if start_x is None:
            start_x = self.rng.randrange(width)
        if end_x is None:
            end_x = self.rng.randrange(width)
        self.start = Coord(start_x, 0)
        self.end = Coord(end_x, height - 1)
        # Fail early on bad columns, before any carving
        self.grid.get_index(*self.start)
        self.grid.get_index(*self.end)

        self.generator = RecursiveBacktracker(self.grid, start=self.start, rng=self.rng)
        self.solver = DepthFirstSolver(self.grid)
        self.path: List[Coord] = []
        self._path_cells: Set[Coord] = set()

        self.generate()

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def generate(self) -> List[Coord]:
        """
        Carves a fresh maze from start and re-solves it.
        Earlier passages are wiped first, carving over them would close loops.
        """
        self.grid.clear()
        self.generator.step_count = 0
        logger.debug("Carving %dx%d maze from %s", self.width, self.height, self.start)
        self.generator.run_all()
        logger.debug("Carved %d passages", self.generator.step_count)
        return self.solve()

    def solve(self) -> List[Coord]:
        self.path = self.solver.run_all(self.start, self.end)
        self._path_cells = set(self.path)
        logger.debug("Path %s -> %s: %d cells (%d visited)",
                     self.start, self.end, len(self.path), self.solver.visited_count)
        return self.path

    def on_path(self, coord: Tuple[int, int]) -> bool:
        return Coord(*coord) in self._path_cells
