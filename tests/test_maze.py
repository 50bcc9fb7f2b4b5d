import pytest

from gameplay.maze import InvalidMazeSize, Maze


def test_maze_dimensions():
    maze = Maze(12, 10)
    assert maze.width == 12
    assert maze.height == 10
    assert len(maze.tiles) == 120
    assert maze.exit_position() == (11, 9)


@pytest.mark.parametrize("width,height", [(9, 10), (10, 9), (0, 0), (-1, 20)])
def test_maze_rejects_small_sizes(width, height):
    with pytest.raises(InvalidMazeSize):
        Maze(width, height)


def test_maze_bounds():
    maze = Maze(10, 10)
    assert maze.in_bounds(0, 0)
    assert maze.in_bounds(9, 9)
    assert not maze.in_bounds(-1, 0)
    assert not maze.in_bounds(10, 5)
    assert not maze.in_bounds(5, 10)

    with pytest.raises(IndexError):
        maze.get_tile(10, 0)


def test_positions_are_column_major():
    maze = Maze(10, 10)
    positions = list(maze.positions())
    assert positions[:3] == [(0, 0), (0, 1), (0, 2)]
    assert positions[10] == (1, 0)
    assert positions[-1] == (9, 9)


def test_is_passable():
    maze = Maze(10, 10)
    maze.get_tile(3, 3).is_wall = True
    assert not maze.is_passable(3, 3)
    assert maze.is_passable(3, 4)
    assert not maze.is_passable(-1, 3)
