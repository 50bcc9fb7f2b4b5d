from core.config import Config
from gameplay.models import Tile


class InvalidMazeSize(ValueError):
    pass


class Maze:
    def __init__(self, width, height):
        if width < Config.MIN_MAZE_SIZE or height < Config.MIN_MAZE_SIZE:
            raise InvalidMazeSize(
                f"Maze must be {Config.MIN_MAZE_SIZE}x{Config.MIN_MAZE_SIZE} "
                f"or bigger, got {width}x{height}."
            )
        self._width = width
        self._height = height
        self.tiles = {}  # {(x, y): Tile}
        for x in range(width):
            for y in range(height):
                self.tiles[(x, y)] = Tile()

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def in_bounds(self, x, y):
        return 0 <= x < self._width and 0 <= y < self._height

    def get_tile(self, x, y):
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the maze")
        return self.tiles[(x, y)]

    def is_passable(self, x, y):
        return self.in_bounds(x, y) and not self.tiles[(x, y)].is_wall

    def exit_position(self):
        return self._width - 1, self._height - 1

    def positions(self):
        """Yields every coordinate column by column, the order generation uses."""
        for x in range(self._width):
            for y in range(self._height):
                yield x, y
