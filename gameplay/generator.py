import logging

from core.config import Config
from gameplay.item import Potion, Weapon
from gameplay.monster import Monster

logger = logging.getLogger(__name__)


class MazeGenerator:
    """
    Fills a Maze with walls, monsters and items.

    The top row and the rightmost column are always left open so the exit in
    the bottom-right corner can be reached from the start at (0, 0).
    rng: anything with numpy Generator semantics (random(), integers()).
    """

    def __init__(self, rng):
        self.rng = rng

    def generate(self, maze):
        self._clear(maze)
        maze.get_tile(*maze.exit_position()).is_exit = True
        self._place_walls(maze)
        self._place_content(maze)
        return maze

    @staticmethod
    def on_route(maze, x, y):
        return y == 0 or x == maze.width - 1

    def _clear(self, maze):
        for x, y in maze.positions():
            tile = maze.get_tile(x, y)
            tile.is_wall = False
            tile.is_exit = False

    def _place_walls(self, maze):
        walls = 0
        for x, y in maze.positions():
            tile = maze.get_tile(x, y)
            if (x, y) == (0, 0) or tile.is_exit or self.on_route(maze, x, y):
                continue

            if self.rng.random() < Config.WALL_CHANCE:
                tile.is_wall = True
                walls += 1
        logger.debug("Placed %d walls", walls)

    def _place_content(self, maze):
        placed = {"monster": 0, "potion": 0, "weapon": 0}
        for x, y in maze.positions():
            tile = maze.get_tile(x, y)
            if tile.is_wall or tile.is_exit or (x, y) == (0, 0):
                continue

            roll = self.rng.random()
            if roll < Config.MONSTER_CHANCE:
                tile.monster = Monster.spawn(self.rng)
                placed["monster"] += 1
            elif roll < Config.POTION_CHANCE:
                tile.item = Potion()
                placed["potion"] += 1
            elif roll < Config.WEAPON_CHANCE:
                bonus = int(
                    self.rng.integers(Config.WEAPON_MIN_BONUS, Config.WEAPON_MAX_BONUS + 1)
                )
                tile.item = Weapon(f"Sword +{bonus}", bonus)
                placed["weapon"] += 1
        logger.debug("Placed content: %s", placed)
