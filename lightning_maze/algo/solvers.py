from array import array
from typing import Iterator, List, Tuple

from lightning_maze.core.errors import NoPathFound
from lightning_maze.core.grid import Coord, Grid
from lightning_maze.algo.base import Solver


class DepthFirstSolver(Solver):
    """
    Walks the carved tree depth-first from start until it steps onto end.
    In a perfect maze that walk is the unique path. Visited marks prevent
    looping if the grid contains cycles.

    Interleaved runs on the same instance are not supported; each run resets
    path and visited state before searching.
    """

    def run(self, start: Tuple[int, int], end: Tuple[int, int]) -> Iterator[str]:
        grid = self.grid
        start, end = Coord(*start), Coord(*end)
        self.path = []
        self.visited_count = 0

        start_idx = grid.get_index(*start)
        grid.get_index(*end)

        if start == end:
            self.visited_count = 1
            self.path = [start]
            yield "Solved"
            return

        # Fresh marks per run, never stored on the grid
        visited = array('B', [0]) * (grid.width * grid.height)
        visited[start_idx] = 1
        self.visited_count = 1

        stack: List[Tuple[Coord, Iterator[Coord]]] = [(start, grid.open_neighbors(start))]

        count = 0
        while stack:
            current, neighbors = stack[-1]

            nxt = None
            for n in neighbors:
                if not visited[n.y * grid.width + n.x]:
                    nxt = n
                    break

            if nxt is None:
                # Dead end, backtrack
                stack.pop()
                continue

            if nxt == end:
                self.visited_count += 1
                self.path = [frame[0] for frame in stack]
                self.path.append(end)
                yield "Solved"
                return

            visited[nxt.y * grid.width + nxt.x] = 1
            self.visited_count += 1
            stack.append((nxt, grid.open_neighbors(nxt)))

            count += 1
            if count % 100 == 0:
                yield f"Stack: {len(stack)}"

        raise NoPathFound(start, end)


def solve(grid: Grid, start: Tuple[int, int], end: Tuple[int, int]) -> List[Coord]:
    """Ordered coords from start to end, both inclusive."""
    return DepthFirstSolver(grid).run_all(start, end)
