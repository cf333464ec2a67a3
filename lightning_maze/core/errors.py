class MazeError(Exception):
    """Base class for all maze engine failures."""


class OutOfBounds(MazeError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"Coordinate ({x}, {y}) out of bounds for {width}x{height} grid")
        self.x = x
        self.y = y


class InvalidDimensions(MazeError, ValueError):
    def __init__(self, width, height):
        super().__init__(f"Grid dimensions must be positive integers, got {width}x{height}")
        self.width = width
        self.height = height


class NoPathFound(MazeError):
    def __init__(self, start, end):
        super().__init__(f"No path from {tuple(start)} to {tuple(end)}")
        self.start = start
        self.end = end
