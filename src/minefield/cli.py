"""
Minefield - command-line entry point.

Usage:
    minefield play [--difficulty {beginner,intermediate,expert}] [--seed N]
    minefield play --width W --height H --mines M
    minefield demo [--games N] [--seed N]
"""
import argparse
import logging
from typing import Callable, List, Optional

import numpy as np

from .board import DIFFICULTIES, Board, BoardConfig
from .environment import MinesweeperEnv, render_board


PLAY_HELP = "Commands: u X Y (uncover), m X Y (mark), q (quit)"


def build_config(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> BoardConfig:
    """Board configuration from a preset or explicit dimensions."""
    custom = (args.width, args.height, args.mines)
    if all(value is None for value in custom):
        return DIFFICULTIES[args.difficulty]
    if any(value is None for value in custom):
        parser.error("--width, --height and --mines must be given together")
    try:
        return BoardConfig(args.width, args.height, args.mines)
    except ValueError as exc:
        parser.error(str(exc))


def play(
    args: argparse.Namespace,
    config: BoardConfig,
    read: Callable[[str], str] = input,
) -> None:
    """Play one game interactively."""
    board = Board(config, np.random.default_rng(args.seed))
    width, height = board.dims()
    print(f"Board: {width}x{height} with {config.num_mines} mines")
    print(PLAY_HELP)

    while not board.is_over:
        print(render_board(board))
        print(f"Mines remaining: {board.mines_remaining}")
        try:
            line = read("> ")
        except EOFError:
            return

        parts = line.split()
        if not parts:
            continue
        if parts[0] == "q":
            return
        if parts[0] not in ("u", "m") or len(parts) != 3:
            print(PLAY_HELP)
            continue
        try:
            x, y = int(parts[1]), int(parts[2])
        except ValueError:
            print(PLAY_HELP)
            continue
        if not (0 <= x < width and 0 <= y < height):
            print(f"Coordinates must be within 0-{width - 1}, 0-{height - 1}")
            continue

        if parts[0] == "u":
            board.handle_uncover(x, y)
        else:
            board.handle_mark(x, y)

    print(render_board(board))
    print("*** WIN! ***" if board.is_victory() else "*** LOST (hit mine) ***")


def demo(args: argparse.Namespace, config: BoardConfig) -> None:
    """Play games by uncovering random tiles and report the results."""
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(args.seed)
    wins = 0

    for game in range(args.games):
        env.reset(seed=None if args.seed is None else args.seed + game)
        done = False
        info = {}
        while not done:
            valid_indices = np.where(env.get_action_mask()[: env.action_space.n // 2])[0]
            action = int(rng.choice(valid_indices))
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        won = info.get("game_state") == "WON"
        wins += won
        print(f"=== Game {game + 1}/{args.games}: {'WIN' if won else 'LOST'} "
              f"in {info.get('steps')} steps ===")
        print(env.render())

    print(f"\n=== Final: {wins}/{args.games} wins ({100 * wins / args.games:.0f}%) ===")


def _add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default="beginner",
        help="Preset board size",
    )
    parser.add_argument("--width", type=int, default=None, help="Custom width")
    parser.add_argument("--height", type=int, default=None, help="Custom height")
    parser.add_argument("--mines", type=int, default=None, help="Custom mine count")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minefield - Minesweeper board engine")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    _add_board_arguments(play_parser)

    demo_parser = subparsers.add_parser("demo", help="Watch random play")
    _add_board_arguments(demo_parser)
    demo_parser.add_argument("--games", type=int, default=5, help="Number of games")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "play":
        play(args, build_config(args, play_parser))
    elif args.command == "demo":
        if args.games < 1:
            demo_parser.error("--games must be positive")
        demo(args, build_config(args, demo_parser))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
