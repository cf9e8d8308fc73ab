"""CLI for solving a puzzle to exhaustion.

Usage::

    uv run python -m ubongo_solver.cli --example b4

    # Solve a puzzle file and dump the solutions as JSON
    uv run python -m ubongo_solver.cli puzzles/my_board.json --json

    # Watch the search, one placement every 50ms
    uv run python -m ubongo_solver.cli --example b38y --play --delay-ms 50
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from ubongo_solver.config import settings
from ubongo_solver.engine.errors import PuzzleLoadError, StepLimitExceededError
from ubongo_solver.engine.models import Game
from ubongo_solver.engine.traced import TracedSolver
from ubongo_solver.puzzles import list_examples, load_example, load_game, solutions_to_json

logger = logging.getLogger(__name__)


def _load(args: argparse.Namespace) -> Game:
    if args.puzzle:
        return load_game(args.puzzle)
    return load_example(args.example or settings.default_example)


def _print_progress(traced: TracedSolver) -> None:
    snap = traced.snapshot()
    print(
        f"\r  step {traced.steps}  depth {snap.work_idx}  "
        f"solutions {traced.solver.solution_count}",
        end="",
        flush=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hex tiling puzzle solver")
    parser.add_argument("puzzle", nargs="?", help="Path to a puzzle JSON file")
    parser.add_argument("--example", help="Name of a bundled example puzzle")
    parser.add_argument("--list", action="store_true", help="List bundled examples and exit")
    parser.add_argument("--max-steps", type=int, default=settings.max_steps)
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print solutions as JSON instead of a summary",
    )
    parser.add_argument(
        "--play",
        action="store_true",
        help="Step with a delay between placements, printing progress",
    )
    parser.add_argument("--delay-ms", type=float, default=settings.play_delay_ms)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level.upper())

    if args.list:
        for name in list_examples():
            print(name)
        return 0

    try:
        game = _load(args)
    except PuzzleLoadError as e:
        print(e.message, file=sys.stderr)
        return 1

    traced = TracedSolver(game)
    try:
        if args.play:
            asyncio.run(traced.play(args.delay_ms, on_step=_print_progress))
            print()
        else:
            traced.run_silent(args.max_steps)
    except StepLimitExceededError as e:
        print(f"Gave up: {e}", file=sys.stderr)
        return 1

    solutions = traced.solver.solutions
    if args.json:
        print(solutions_to_json(solutions))
        return 0

    print(f"Board: {len(game.board)} cells, {len(game.pieces)} pieces")
    print(f"Steps: {traced.steps}  |  Time: {traced.duration * 1000:.1f}ms")
    print(f"Solutions: {len(solutions)}")
    for i, solution in enumerate(solutions):
        print(f"  #{i + 1}")
        for piece_i, piece in enumerate(solution):
            cells = " ".join(f"({q},{r})" for q, r in piece)
            print(f"    {chr(ord('a') + piece_i % 26)}: {cells}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
