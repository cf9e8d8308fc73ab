"""Tests for the instrumented solver and paced playback."""

from __future__ import annotations

import asyncio

import pytest

from ubongo_solver.engine.errors import StepLimitExceededError
from ubongo_solver.engine.models import Game, StepResult
from ubongo_solver.engine.solver import Solver
from ubongo_solver.engine.traced import TracedSolver


class TestStepping:
    def test_counts_match_plain_solver(self, b4_game: Game) -> None:
        traced = TracedSolver(b4_game)
        steps = traced.run_silent()
        assert steps == Solver(b4_game).run()
        assert traced.is_done
        assert traced.solver.solution_count == 1

    def test_duration_accumulates(self, b4_game: Game) -> None:
        traced = TracedSolver(b4_game)
        traced.run_silent()
        assert traced.duration > 0.0

    def test_exhausting_step_is_not_counted(self, rhombus_game: Game) -> None:
        traced = TracedSolver(rhombus_game)
        traced.run_silent()
        assert traced.steps == 9
        assert traced.step() is StepResult.EXHAUSTED
        assert traced.steps == 9

    def test_step_limit(self, b4_game: Game) -> None:
        with pytest.raises(StepLimitExceededError):
            TracedSolver(b4_game).run_silent(max_steps=3)

    def test_new_solutions_are_incremental(self, rhombus_game: Game) -> None:
        traced = TracedSolver(rhombus_game)
        assert traced.new_solutions() == []
        seen = []
        while traced.step() is StepResult.STEPPED:
            seen.extend(traced.new_solutions())
        seen.extend(traced.new_solutions())
        assert seen == traced.solver.solutions
        assert traced.new_solutions() == []

    def test_set_game_resets(self, b4_game: Game, rhombus_game: Game) -> None:
        traced = TracedSolver(b4_game)
        traced.run_silent()
        traced.set_game(rhombus_game)
        assert traced.steps == 0
        assert traced.duration == 0.0
        assert not traced.is_done
        assert traced.solver.solution_count == 0
        assert traced.run_silent() == 9

    def test_default_game_is_empty(self) -> None:
        traced = TracedSolver()
        assert traced.step() is StepResult.EXHAUSTED
        assert traced.is_done


class TestPlayback:
    async def test_play_runs_to_completion(self, rhombus_game: Game) -> None:
        traced = TracedSolver(rhombus_game)
        calls: list[int] = []
        await traced.play(0, on_step=lambda t: calls.append(t.steps))
        assert traced.is_done
        assert traced.steps == 9
        # One callback per placement plus one for the exhausting step.
        assert len(calls) == 10
        assert calls[-1] == 9

    async def test_pause_and_resume(self, b38y_game: Game) -> None:
        traced = TracedSolver(b38y_game)
        traced.start(0)
        assert traced.is_running
        for _ in range(5):
            await asyncio.sleep(0)
        traced.pause()
        assert not traced.is_running

        paused_at = traced.steps
        assert 0 < paused_at
        for _ in range(5):
            await asyncio.sleep(0)
        assert traced.steps == paused_at
        assert not traced.is_done

        await traced.start(0)
        assert traced.is_done
        assert traced.solver.solution_count == 4

    async def test_start_replaces_running_task(self, b38y_game: Game) -> None:
        traced = TracedSolver(b38y_game)
        first = traced.start(0)
        await asyncio.sleep(0)
        second = traced.start(0)
        await asyncio.sleep(0)
        assert first.cancelled()
        await second
        assert traced.solver.solution_count == 4
