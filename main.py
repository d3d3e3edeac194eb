"""Command-line host for the chess engine."""

from __future__ import annotations

import argparse
import logging
import sys

from minichess.constants import DEFAULT_SEED, START_LAYOUT
from minichess.engine import Engine
from minichess.errors import EngineError
from minichess.pieces import Color, symbol_of

logger = logging.getLogger("minichess.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Minichess engine utilities")
    parser.add_argument("--layout", default=START_LAYOUT, help="64 board symbols, rank 0 first")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Random seed applied on reset")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")

    subparsers = parser.add_subparsers(dest="command", required=False)

    subparsers.add_parser("show", help="Print the board")

    moves_parser = subparsers.add_parser("moves", help="List pseudo-legal moves")
    moves_parser.add_argument("--side", choices=("white", "black"), default="white")

    apply_parser = subparsers.add_parser("apply", help="Move a piece between two squares")
    apply_parser.add_argument("from_square", type=int)
    apply_parser.add_argument("to_square", type=int)

    play_parser = subparsers.add_parser("play", help="Alternate random moves starting with White")
    play_parser.add_argument("--plies", type=int, default=20, help="Maximum number of half-moves")

    return parser


def _engine_for(args: argparse.Namespace) -> Engine:
    engine = Engine(seed=args.seed)
    if args.layout != START_LAYOUT:
        engine.get_board().load(args.layout)
    return engine


def play(engine: Engine, plies: int) -> list[int]:
    """Alternate random moves; stops early when the side to move has none."""
    side = Color.WHITE
    counts: list[int] = []
    for _ in range(plies):
        count = engine.random_ai(side)
        if count == 0:
            logger.info("no moves available for %s", side.name.lower())
            break
        counts.append(count)
        side = side.opposite
    return counts


def run(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    try:
        engine = _engine_for(args)

        if args.command == "moves":
            side = Color.WHITE if args.side == "white" else Color.BLACK
            count = engine.generate_moves(side)
            for move in engine.get_moves():
                print(f"{move.from_square} -> {move.to_square} captured={symbol_of(move.captured)}")
            print(f"{count} moves")
            return 0

        if args.command == "apply":
            engine.apply_move(args.from_square, args.to_square)
            print(engine.get_board())
            return 0

        if args.command == "play":
            counts = play(engine, args.plies)
            print(engine.get_board())
            print(f"plies {len(counts)}")
            return 0
    except EngineError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(engine.get_board())
    return 0


if __name__ == "__main__":
    sys.exit(run())
