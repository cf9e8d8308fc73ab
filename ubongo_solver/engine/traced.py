"""Instrumented solver for paced playback.

Wraps a ``Solver`` with a step counter and the wall-clock time spent inside
``Solver.step``. Playback runs as an asyncio task that sleeps between steps;
pausing cancels the task, and the search resumes from the same state on the
next ``start``.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable

from ubongo_solver.engine.axial import Axial
from ubongo_solver.engine.errors import StepLimitExceededError
from ubongo_solver.engine.models import Game, SolverSnapshot, StepResult
from ubongo_solver.engine.solver import Solver

logger = logging.getLogger(__name__)

StepCallback = Callable[["TracedSolver"], None]


class TracedSolver:
    def __init__(self, game: Game | None = None) -> None:
        self.solver = Solver(game or Game())
        self.steps = 0
        self.duration = 0.0  # seconds spent inside Solver.step
        self.is_done = False
        self._solutions_seen = 0
        self._task: asyncio.Task | None = None

    def set_game(self, game: Game) -> None:
        """Replace the solver and reset all counters."""
        self.pause()
        self.solver = Solver(game)
        self.steps = 0
        self.duration = 0.0
        self.is_done = False
        self._solutions_seen = 0

    # ------------------------------------------------------------------ #
    #  Stepping
    # ------------------------------------------------------------------ #

    def step(self) -> StepResult:
        if self.is_done:
            return StepResult.EXHAUSTED

        start = time.perf_counter()
        result = self.solver.step()
        self.duration += time.perf_counter() - start

        if result is StepResult.EXHAUSTED:
            self.is_done = True
        else:
            self.steps += 1
        return result

    def run_silent(self, max_steps: int | None = None) -> int:
        """Step without pacing until done; return the total step count."""
        while self.step() is StepResult.STEPPED:
            if max_steps is not None and self.steps >= max_steps:
                raise StepLimitExceededError(max_steps)
        return self.steps

    def new_solutions(self) -> list[list[list[Axial]]]:
        """Solutions found since the previous call."""
        fresh = self.solver.solutions[self._solutions_seen:]
        self._solutions_seen += len(fresh)
        return fresh

    def snapshot(self) -> SolverSnapshot:
        return self.solver.snapshot()

    # ------------------------------------------------------------------ #
    #  Playback
    # ------------------------------------------------------------------ #

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def play(self, delay_ms: float, on_step: StepCallback | None = None) -> None:
        """Step until done, sleeping *delay_ms* between steps."""
        logger.info("Playback started (delay=%sms)", delay_ms)
        try:
            while not self.is_done:
                self.step()
                if on_step is not None:
                    on_step(self)
                await asyncio.sleep(delay_ms / 1000)
        finally:
            logger.info(
                f"Playback stopped after {self.steps} steps, "
                f"{self.solver.solution_count} solutions"
            )

    def start(self, delay_ms: float, on_step: StepCallback | None = None) -> asyncio.Task:
        """Run ``play`` as a background task, replacing any running one."""
        self.pause()
        self._task = asyncio.create_task(self.play(delay_ms, on_step))
        return self._task

    def pause(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None
