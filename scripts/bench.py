#!/usr/bin/env python3
"""Generate reproducible benchmark CSVs for move generation and random play."""

from __future__ import annotations

import argparse
import csv
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from minichess.constants import START_LAYOUT
from minichess.engine import Engine
from minichess.pieces import Color


OPEN_MIDDLE_LAYOUT = (
    "r...k..r"
    "ppp..ppp"
    "..n.bn.."
    "...pp..."
    "..BPP..."
    "..N..N.."
    "PPP..PPP"
    "R...K..R"
)


@dataclass(frozen=True)
class PositionCase:
    name: str
    layout: str


def _write_csv(path: Path, fieldnames: list[str], rows: list[dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)


def run_movegen_bench(cases: list[PositionCase], iterations: int) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for case in cases:
        engine = Engine()
        engine.get_board().load(case.layout)
        for side in (Color.WHITE, Color.BLACK):
            start = perf_counter()
            count = 0
            for _ in range(iterations):
                count = engine.generate_moves(side)
            elapsed_ms = (perf_counter() - start) * 1000.0
            rows.append(
                {
                    "position": case.name,
                    "side": side.name.lower(),
                    "moves": count,
                    "iterations": iterations,
                    "elapsed_ms": round(elapsed_ms, 3),
                    "calls_per_sec": int(iterations / max(elapsed_ms / 1000.0, 1e-9)),
                }
            )
    return rows


def run_playout_bench(games: int, plies: int, seed: int) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    engine = Engine(seed=seed)
    for game in range(games):
        engine.reset()
        side = Color.WHITE
        played = 0
        start = perf_counter()
        for _ in range(plies):
            if engine.random_ai(side) == 0:
                break
            played += 1
            side = side.opposite
        elapsed_ms = (perf_counter() - start) * 1000.0
        rows.append(
            {
                "game": game,
                "plies": played,
                "elapsed_ms": round(elapsed_ms, 3),
                "final_board": engine.get_board().symbols(),
            }
        )
    return rows


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate minichess benchmark CSV files")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Output directory for CSV metrics",
    )
    parser.add_argument("--iterations", type=int, default=2000, help="Generation calls per position and side")
    parser.add_argument("--games", type=int, default=10, help="Random playouts to run")
    parser.add_argument("--plies", type=int, default=200, help="Maximum half-moves per playout")
    parser.add_argument("--seed", type=int, default=42, help="Seed applied on every reset")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    metrics_dir = Path(args.metrics_dir)

    cases = [
        PositionCase("start", START_LAYOUT),
        PositionCase("open_middle", OPEN_MIDDLE_LAYOUT),
    ]

    movegen_rows = run_movegen_bench(cases, args.iterations)
    # Every game starts from a reset, so all playouts repeat the same moves.
    playout_rows = run_playout_bench(args.games, args.plies, args.seed)

    movegen_path = metrics_dir / "movegen_metrics.csv"
    playout_path = metrics_dir / "playout_metrics.csv"

    _write_csv(
        movegen_path,
        fieldnames=["position", "side", "moves", "iterations", "elapsed_ms", "calls_per_sec"],
        rows=movegen_rows,
    )
    _write_csv(
        playout_path,
        fieldnames=["game", "plies", "elapsed_ms", "final_board"],
        rows=playout_rows,
    )

    print(f"wrote {movegen_path}")
    print(f"wrote {playout_path}")


if __name__ == "__main__":
    main()
