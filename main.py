import argparse
import logging

from core.config import Config
from gameplay.engine import Direction, GameEngine, GameStatus
from gameplay.maze import InvalidMazeSize
from visuals.ascii_view import render_maze, render_status

TEXT_COMMANDS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


def run_text_mode(engine, read=input, write=print):
    """Plays in the terminal: one command per line, 'q' quits."""
    message = "Welcome to the Adventure Game!"

    while not engine.is_over:
        write(message)
        write("")
        write(render_maze(engine))
        write("")
        write(render_status(engine))

        try:
            command = read("> ").strip().lower()
        except EOFError:
            return None

        if command == "q":
            return None

        direction = TEXT_COMMANDS.get(command)
        if direction is None:
            message = "Use WASD to move."
            continue

        message = engine.move(direction).message

    write(message)
    if engine.status == GameStatus.PLAYER_WON:
        write("You have escaped the maze!")
    else:
        write("You have died. Game over.")
    return engine.status


def build_parser():
    parser = argparse.ArgumentParser(description="Turn-based maze adventure")
    parser.add_argument("--width", type=int, default=Config.DEFAULT_MAZE_WIDTH)
    parser.add_argument("--height", type=int, default=Config.DEFAULT_MAZE_HEIGHT)
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible maze")
    parser.add_argument("--text", action="store_true", help="Play in the terminal instead of a window")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.text:
        try:
            engine = GameEngine(args.width, args.height, seed=args.seed)
        except InvalidMazeSize as e:
            parser.error(str(e))
        run_text_mode(engine)
        return

    if args.width < Config.MIN_MAZE_SIZE or args.height < Config.MIN_MAZE_SIZE:
        parser.error(f"Maze must be {Config.MIN_MAZE_SIZE}x{Config.MIN_MAZE_SIZE} or bigger.")

    from ui.game_window import GameWindow

    GameWindow(args.width, args.height, seed=args.seed).run()


if __name__ == "__main__":
    main()
