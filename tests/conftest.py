import pytest

from gameplay.engine import GameEngine


class ScriptedRng:
    """Stands in for numpy's Generator, handing out pre-set values in order.

    Once the scripted values run out random() returns 0.99 (no wall, no
    content) and integers() returns its lower bound.
    """

    def __init__(self, randoms=(), integers=()):
        self.randoms = list(randoms)
        self.ints = list(integers)
        self.random_calls = 0
        self.integer_calls = []

    def random(self):
        self.random_calls += 1
        return self.randoms.pop(0) if self.randoms else 0.99

    def integers(self, low, high):
        self.integer_calls.append((low, high))
        return self.ints.pop(0) if self.ints else low


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def open_engine():
    """10x10 engine with no walls, monsters or items; only the exit."""
    return GameEngine(10, 10, rng=ScriptedRng())
