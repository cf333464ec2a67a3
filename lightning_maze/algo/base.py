import random
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple

from lightning_maze.core.grid import Coord, Grid


class Generator(ABC):
    def __init__(self, grid: Grid, start: Tuple[int, int] = (0, 0),
                 seed: int = None, rng: Optional[random.Random] = None):
        self.grid = grid
        self.start = Coord(*start)
        # Informational only, kept for reporting; carving always draws from self.rng
        self.seed = seed
        # An explicit rng wins over the seed, so callers can share one source
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass


class Solver(ABC):
    def __init__(self, grid: Grid):
        self.grid = grid
        self.path: List[Coord] = []
        self.visited_count = 0

    @abstractmethod
    def run(self, start: Tuple[int, int], end: Tuple[int, int]) -> Iterator[str]:
        pass

    def run_all(self, start: Tuple[int, int], end: Tuple[int, int]) -> List[Coord]:
        for _ in self.run(start, end):
            pass
        return self.path
