"""
Domino Duel CLI - Command-line interface for the engine.

Usage:
    domino start <name> <name>     Play a full match between two bots
"""

import argparse
import random
import sys

from src.config import configure_logging, get_settings
from src.engine import InvalidPlayerCount, Match
from src.ui.text import render_match_log


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Domino Duel - two-player double-six dominoes",
        prog="domino",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    start_parser = subparsers.add_parser("start", help="Starts the dominoes game")
    start_parser.add_argument(
        "names",
        nargs="*",
        help='Player names [example: domino start "Alice" "Bob"]',
    )
    start_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    start_parser.add_argument(
        "--tiles-per-hand", type=int, default=None, help="Tiles dealt to each player"
    )
    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "start":
        return cmd_start(args)

    parser.print_help()
    return 1


def cmd_start(args) -> int:
    """Play one match and print its history."""
    settings = get_settings()
    configure_logging(settings)

    seed = args.seed if args.seed is not None else settings.seed
    tiles_per_hand = (
        args.tiles_per_hand if args.tiles_per_hand is not None else settings.tiles_per_hand
    )

    try:
        match = Match(
            args.names,
            tiles_per_hand=tiles_per_hand,
            rng=random.Random(seed),
        )
    except InvalidPlayerCount:
        print("Two players are needed to play!", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("Starting game...")
    outcome = match.run()
    print(render_match_log(match.events, outcome))
    return 0


if __name__ == "__main__":
    sys.exit(main())
