import random
from array import array
from typing import Iterator, List, Tuple

from lightning_maze.core.grid import Coord, Direction, Grid
from lightning_maze.algo.base import Generator


class RecursiveBacktracker(Generator):
    """
    Randomized depth-first carving. Produces a perfect maze: every cell is
    joined to the tree exactly once, so the result has width*height - 1 edges
    and no cycles.

    The call-stack recursion is replaced by a stack of
    (cell, untried directions) frames, so large grids do not hit the
    interpreter's recursion limit.
    """

    def run(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng
        start = self.start

        # Local to this pass, unrelated to any solver bookkeeping
        in_tree = array('B', [0]) * (grid.width * grid.height)
        in_tree[grid.get_index(*start)] = 1

        stack: List[Tuple[Coord, List[Direction]]] = [(start, list(Direction))]

        while stack:
            current, remaining = stack[-1]

            if not remaining:
                # Backtrack
                stack.pop()
                continue

            # Pick-and-remove a uniformly random untried direction
            direction = remaining.pop(rng.randrange(len(remaining)))
            if not grid.is_direction_valid(current, direction):
                continue

            nxt = grid.neighbor_coord(current, direction)
            n_idx = nxt.y * grid.width + nxt.x
            if in_tree[n_idx]:
                # Already joined, connecting would close a loop
                continue

            grid.add_connection(current, direction)
            in_tree[n_idx] = 1
            stack.append((nxt, list(Direction)))
            self.step_count += 1

            # Yield every N steps to keep callers responsive without spamming
            if self.step_count % 100 == 0:
                yield f"Carving... Stack: {len(stack)}"

        yield "Done"


def generate(grid: Grid, start: Tuple[int, int], rng: random.Random) -> Grid:
    """Carves a perfect maze into 'grid' starting from 'start'."""
    RecursiveBacktracker(grid, start=start, rng=rng).run_all()
    return grid
