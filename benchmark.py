#!/usr/bin/env python3
"""Benchmark: solve every bundled example to exhaustion.

Run from the repository root:
    uv run python benchmark.py [--rounds N]

Each round builds a fresh solver from the puzzle and steps it until the
search space is exhausted.
"""

from __future__ import annotations

import argparse
import time

from ubongo_solver.puzzles import list_examples, load_example


def bench_example(name: str, rounds: int) -> dict:
    game = load_example(name)

    durations: list[float] = []
    steps = solutions = 0
    for _ in range(rounds):
        solver = game.solver()
        t0 = time.monotonic()
        steps = solver.run()
        durations.append(time.monotonic() - t0)
        solutions = solver.solution_count

    avg_ms = sum(durations) / max(len(durations), 1) * 1000
    return {
        "steps": steps,
        "solutions": solutions,
        "avg_ms": avg_ms,
        "best_ms": min(durations) * 1000,
        "steps_per_sec": steps / max(avg_ms / 1000, 1e-9),
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Solver benchmark")
    parser.add_argument("--rounds", type=int, default=10)
    parser.add_argument("examples", nargs="*", help="Examples to run (default: all)")
    args = parser.parse_args()

    names = args.examples or list_examples()
    print(f"{'example':>10s}  {'steps':>8s}  {'sols':>4s}  {'avg':>10s}  {'best':>10s}  {'steps/s':>10s}")
    print("-" * 62)
    for name in names:
        r = bench_example(name, args.rounds)
        print(
            f"{name:>10s}  {r['steps']:8d}  {r['solutions']:4d}  "
            f"{r['avg_ms']:8.1f}ms  {r['best_ms']:8.1f}ms  {r['steps_per_sec']:10.0f}"
        )


if __name__ == "__main__":
    main()
