import logging
from dataclasses import dataclass
from enum import Enum

import numpy as np

from gameplay.generator import MazeGenerator
from gameplay.maze import Maze
from gameplay.player import Player

logger = logging.getLogger(__name__)


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    PLAYER_WON = "player_won"
    PLAYER_DEAD = "player_dead"


@dataclass
class MoveResult:
    """What happened during a single move() call."""
    moved: bool = False
    message: str = ""
    battle_occurred: bool = False
    item_picked_up: bool = False
    reached_exit: bool = False
    player_died: bool = False


class GameEngine:
    """
    Owns the maze, the player and the game status.

    move() is the only way to change any of them. Blocked moves (walls,
    maze edges, finished game) are reported through MoveResult, not raised.
    """

    def __init__(self, width=10, height=10, rng=None, seed=None):
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._maze = Maze(width, height)
        self._player = Player()
        self._x, self._y = 0, 0
        self._status = GameStatus.IN_PROGRESS

        MazeGenerator(self._rng).generate(self._maze)
        logger.info("New %dx%d game started", width, height)

    @property
    def maze(self):
        return self._maze

    @property
    def player(self):
        return self._player

    @property
    def status(self):
        return self._status

    @property
    def player_x(self):
        return self._x

    @property
    def player_y(self):
        return self._y

    @property
    def position(self):
        return self._x, self._y

    @property
    def is_over(self):
        return self._status != GameStatus.IN_PROGRESS

    def move(self, direction):
        if self.is_over:
            return MoveResult(moved=False, message="Game is over.")

        dx, dy = direction.value
        target_x, target_y = self._x + dx, self._y + dy

        if not self._maze.in_bounds(target_x, target_y):
            return MoveResult(moved=False, message="You cannot move outside the maze.")

        tile = self._maze.get_tile(target_x, target_y)
        if tile.is_wall:
            return MoveResult(moved=False, message="A wall is blocking your path.")

        self._x, self._y = target_x, target_y

        if tile.monster is not None:
            message = self._resolve_battle(tile.monster)
            died = self._status == GameStatus.PLAYER_DEAD
            if not died:
                tile.monster = None
            return MoveResult(
                moved=True, message=message, battle_occurred=True, player_died=died
            )

        if tile.item is not None:
            item = tile.item
            self._player.add_item(item)
            tile.item = None
            logger.debug("Picked up %r at %s", item, self.position)
            return MoveResult(moved=True, message=item.pickup_message, item_picked_up=True)

        if tile.is_exit:
            self._set_status(GameStatus.PLAYER_WON)
            return MoveResult(moved=True, message="You found the exit!", reached_exit=True)

        return MoveResult(moved=True, message="You moved to an empty tile.")

    def _resolve_battle(self, monster):
        log = []
        while self._player.is_alive() and monster.is_alive():
            self._player.attack(monster)
            log.append(f"You hurt the monster. Monster HP: {monster.hp}")
            if not monster.is_alive():
                log.append("You defeated the monster! Great job!")
                break

            monster.attack(self._player)
            log.append(f"The monster damages you. Your HP: {self._player.hp}")
            if not self._player.is_alive():
                log.append("You have died.")
                self._set_status(GameStatus.PLAYER_DEAD)
                break

        logger.debug("Battle at %s ended with player hp %d", self.position, self._player.hp)
        return " ".join(log)

    def _set_status(self, status):
        logger.info("Game status: %s -> %s", self._status.value, status.value)
        self._status = status
