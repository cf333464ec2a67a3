from array import array
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, NamedTuple, Tuple

from lightning_maze.core.errors import InvalidDimensions, OutOfBounds


class Coord(NamedTuple):
    x: int
    y: int


class Direction(IntEnum):
    # Bitmask values, one bit per side of a cell
    UP    = 0b0001
    DOWN  = 0b0100
    LEFT  = 0b1000
    RIGHT = 0b0010

    @property
    def dx(self) -> int:
        return Grid.DX[self]

    @property
    def dy(self) -> int:
        return Grid.DY[self]

    @property
    def opposite(self) -> "Direction":
        return Grid.OPPOSITE[self]


@dataclass(frozen=True)
class Cell:
    """Read-only snapshot of one grid position and its openings."""
    coord: Coord
    outgoing: Tuple[Direction, ...]
    connections: Tuple[Direction, ...]

    @property
    def x(self) -> int:
        return self.coord.x

    @property
    def y(self) -> int:
        return self.coord.y


class Grid:
    # Low nibble: connections recorded by this cell (parent -> child during generation)
    OUTGOING_MASK = 0b00001111
    # High nibble: the same connections mirrored onto the neighbor
    MIRROR_SHIFT = 4
    MIRROR_MASK = 0b11110000

    DX = {Direction.UP: 0, Direction.DOWN: 0, Direction.LEFT: -1, Direction.RIGHT: 1}
    DY = {Direction.UP: -1, Direction.DOWN: 1, Direction.LEFT: 0, Direction.RIGHT: 0}
    OPPOSITE = {
        Direction.UP: Direction.DOWN,
        Direction.DOWN: Direction.UP,
        Direction.LEFT: Direction.RIGHT,
        Direction.RIGHT: Direction.LEFT,
    }

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        if (not isinstance(width, int) or not isinstance(height, int)
                or isinstance(width, bool) or isinstance(height, bool)
                or width <= 0 or height <= 0):
            raise InvalidDimensions(width, height)
        self.width = width
        self.height = height
        # 'B' (unsigned char) -> 1 byte per cell, no connections yet
        self.cells = array('B', [0] * (width * height))

    @classmethod
    def create(cls, width: int, height: int) -> "Grid":
        return cls(width, height)

    def clear(self):
        """Removes every connection, leaving dimensions unchanged."""
        self.cells = array('B', [0] * (self.width * self.height))

    def __len__(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise OutOfBounds(x, y, self.width, self.height)

    def coord_at(self, idx: int) -> Coord:
        return Coord(idx % self.width, idx // self.width)

    def coords(self) -> Iterator[Coord]:
        """Every coordinate in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Coord(x, y)

    def cell_at(self, x: int, y: int) -> Cell:
        val = self.cells[self.get_index(x, y)]
        return Cell(
            coord=Coord(x, y),
            outgoing=self._directions(val & self.OUTGOING_MASK),
            connections=self._directions(self._open_mask(val)),
        )

    @staticmethod
    def neighbor_coord(coord: Tuple[int, int], direction: Direction) -> Coord:
        """
        Adjacent coordinate in 'direction'.
        No bounds checking, call is_direction_valid first.
        """
        x, y = coord
        return Coord(x + Grid.DX[direction], y + Grid.DY[direction])

    def is_direction_valid(self, coord: Tuple[int, int], direction: Direction) -> bool:
        x, y = coord
        if direction == Direction.UP:
            return y > 0
        if direction == Direction.DOWN:
            return y < self.height - 1
        if direction == Direction.LEFT:
            return x > 0
        if direction == Direction.RIGHT:
            return x < self.width - 1
        return False

    def add_connection(self, coord: Tuple[int, int], direction: Direction) -> bool:
        """
        Records an opening from 'coord' towards 'direction'.
        The cell keeps the outgoing bit, the neighbor gets the mirrored bit so
        the edge can be walked both ways.
        Silently ignored (returns False) when the direction leaves the grid.
        """
        x, y = coord
        idx = self.get_index(x, y)
        if not self.is_direction_valid(coord, direction):
            return False

        nx, ny = self.neighbor_coord(coord, direction)
        self.cells[idx] |= direction
        self.cells[ny * self.width + nx] |= self.OPPOSITE[direction] << self.MIRROR_SHIFT
        return True

    def has_connection(self, coord: Tuple[int, int], direction: Direction) -> bool:
        x, y = coord
        return (self._open_mask(self.cells[self.get_index(x, y)]) & direction) != 0

    def connections(self, coord: Tuple[int, int]) -> Tuple[Direction, ...]:
        x, y = coord
        return self._directions(self._open_mask(self.cells[self.get_index(x, y)]))

    def outgoing(self, coord: Tuple[int, int]) -> Tuple[Direction, ...]:
        x, y = coord
        return self._directions(self.cells[self.get_index(x, y)] & self.OUTGOING_MASK)

    def open_mask(self, x: int, y: int) -> int:
        """Traversable directions of a cell as a bitmask, regardless of which side recorded them."""
        return self._open_mask(self.cells[self.get_index(x, y)])

    def open_neighbors(self, coord: Tuple[int, int]) -> Iterator[Coord]:
        """
        Yields neighbor coords that are reachable through a connection.
        """
        x, y = coord
        mask = self._open_mask(self.cells[self.get_index(x, y)])
        for direction in Direction:
            if mask & direction:
                yield Coord(x + self.DX[direction], y + self.DY[direction])

    def edge_count(self) -> int:
        # Each undirected edge is counted once, from its upper/left cell
        count = 0
        for val in self.cells:
            mask = self._open_mask(val)
            if mask & Direction.RIGHT:
                count += 1
            if mask & Direction.DOWN:
                count += 1
        return count

    @classmethod
    def _open_mask(cls, val: int) -> int:
        return (val & cls.OUTGOING_MASK) | (val >> cls.MIRROR_SHIFT)

    @staticmethod
    def _directions(mask: int) -> Tuple[Direction, ...]:
        return tuple(d for d in Direction if mask & d)
