from gameplay.item import Potion, Weapon

SYMBOLS = {
    "player": "@",
    "wall": "#",
    "exit": "E",
    "monster": "M",
    "weapon": "W",
    "potion": "P",
    "empty": ".",
}


def tile_symbol(tile):
    if tile.is_wall:
        return SYMBOLS["wall"]
    if tile.is_exit:
        return SYMBOLS["exit"]
    if tile.monster is not None:
        return SYMBOLS["monster"]
    if isinstance(tile.item, Weapon):
        return SYMBOLS["weapon"]
    if isinstance(tile.item, Potion):
        return SYMBOLS["potion"]
    return SYMBOLS["empty"]


def render_maze(engine):
    """Returns the maze as text, one row per line, with the player drawn as '@'."""
    maze = engine.maze
    rows = []
    for y in range(maze.height):
        cells = []
        for x in range(maze.width):
            if (x, y) == engine.position:
                cells.append(SYMBOLS["player"])
            else:
                cells.append(tile_symbol(maze.get_tile(x, y)))
        rows.append(" ".join(cells))
    return "\n".join(rows)


def render_status(engine):
    return f"HP: {engine.player.hp}"
