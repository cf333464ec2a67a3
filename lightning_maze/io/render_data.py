"""
Hand-off structures for whatever draws the maze.

Nothing here knows about colors, strokes or canvases. A renderer gets the
cell openings and the solved route and decides the presentation itself.
"""
from typing import Iterable, Iterator, NamedTuple, Tuple

import numpy as np

from lightning_maze.core.grid import Coord, Direction, Grid


class CellRecord(NamedTuple):
    coord: Coord
    outgoing: Tuple[Direction, ...]
    connections: Tuple[Direction, ...]


def cell_records(grid: Grid) -> Iterator[CellRecord]:
    for coord in grid.coords():
        cell = grid.cell_at(*coord)
        yield CellRecord(cell.coord, cell.outgoing, cell.connections)


def connection_array(grid: Grid) -> np.ndarray:
    """
    (height, width) uint8 array of traversable direction bits per cell.
    Mirrored bits are folded into the low nibble.
    """
    raw = np.frombuffer(grid.cells, dtype=np.uint8).reshape(grid.height, grid.width)
    return (raw & Grid.OUTGOING_MASK) | (raw >> Grid.MIRROR_SHIFT)


def path_mask(grid: Grid, path: Iterable[Tuple[int, int]]) -> np.ndarray:
    mask = np.zeros((grid.height, grid.width), dtype=bool)
    for x, y in path:
        grid.get_index(x, y)
        mask[y, x] = True
    return mask


def path_order(grid: Grid, path: Iterable[Tuple[int, int]]) -> np.ndarray:
    """Step index of each cell along the path, -1 for cells off the path."""
    order = np.full((grid.height, grid.width), -1, dtype=np.int32)
    for step, (x, y) in enumerate(path):
        grid.get_index(x, y)
        order[y, x] = step
    return order
