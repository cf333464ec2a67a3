from typing import Dict, Iterable, Set, Tuple

from lightning_maze.core.grid import Coord, Direction, Grid


def popcount_openings(mask: int) -> int:
    c = 0
    for direction in Direction:
        if mask & direction:
            c += 1
    return c


class MazeInspector:
    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, float]:
        dead_ends = 0
        corridors = 0 # 2 openings
        junctions = 0 # 3, 4 openings
        isolated = 0

        for y in range(grid.height):
            for x in range(grid.width):
                openings = popcount_openings(grid.open_mask(x, y))
                if openings == 1: dead_ends += 1
                elif openings == 2: corridors += 1
                elif openings >= 3: junctions += 1
                else: isolated += 1

        total = grid.width * grid.height
        return {
            "edges": grid.edge_count(),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "isolated": isolated,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }

    @staticmethod
    def reachable(grid: Grid, start: Tuple[int, int]) -> Set[Coord]:
        start = Coord(*start)
        grid.get_index(*start)
        seen = {start}
        stack = [start]
        while stack:
            for n in grid.open_neighbors(stack.pop()):
                if n not in seen:
                    seen.add(n)
                    stack.append(n)
        return seen

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        A spanning tree has exactly N-1 edges and reaches every cell.
        Together those rule out cycles.
        """
        total = grid.width * grid.height
        if grid.edge_count() != total - 1:
            return False
        return len(MazeInspector.reachable(grid, (0, 0))) == total

    @staticmethod
    def validate_path(grid: Grid, path: Iterable[Tuple[int, int]]) -> bool:
        """True when every consecutive pair of coords shares a connection."""
        prev = None
        for step in path:
            step = Coord(*step)
            if not grid.in_bounds(*step):
                return False
            if prev is not None and step not in set(grid.open_neighbors(prev)):
                return False
            prev = step
        return True
