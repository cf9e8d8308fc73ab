"""Resumable depth-first search over piece placements.

The search is a stack of ``Placer`` objects, one per piece slot, plus a work
index. ``Solver.step`` advances until exactly one piece has been placed (or
the search space is exhausted), so a caller can render every intermediate
board. Backtracking and recording a finished tiling happen inside a step and
are never visible as steps of their own.
"""

from __future__ import annotations

import logging

from ubongo_solver.engine.axial import Axial
from ubongo_solver.engine.cells import Cells, canonicalize_place, place
from ubongo_solver.engine.errors import StepLimitExceededError
from ubongo_solver.engine.models import Game, Solution, SolverSnapshot, StepResult
from ubongo_solver.engine.orientations import piece_orientations
from ubongo_solver.engine.placer import Placer

logger = logging.getLogger(__name__)


class Solver:
    """Finds every exact tiling of ``game.board`` by ``game.pieces``.

    Piece and orientation data are fixed at construction. Only the placers,
    the working buffer ``pieces``, ``work_idx`` and the solutions collection
    change as the search advances.
    """

    def __init__(self, game: Game) -> None:
        self.game = game
        self.pieces_orientations: list[list[Cells]] = [
            piece_orientations(piece) for piece in game.pieces
        ]
        # One placer per slot 0..work_idx, capped at the piece count.
        self.placers: list[Placer] = []
        # Working buffer: slot i holds piece i as last placed.
        self.pieces: list[Cells] = [list(piece) for piece in game.pieces]
        self.work_idx = 0
        self.is_done = False
        # Insertion-ordered set.
        self._solutions: dict[Solution, None] = {}

        if game.pieces:
            self.placers.append(Placer(game.board, self.pieces_orientations[0]))

    def __repr__(self) -> str:
        return (
            f"Solver(pieces={len(self.pieces)}, work_idx={self.work_idx}, "
            f"solutions={len(self._solutions)}, is_done={self.is_done})"
        )

    # ------------------------------------------------------------------ #
    #  Stepping
    # ------------------------------------------------------------------ #

    def step(self) -> StepResult:
        """Place one piece, backtracking as needed.

        Returns ``StepResult.EXHAUSTED`` once slot 0 has no placements left;
        every later call returns it again.
        """
        if self.is_done:
            return StepResult.EXHAUSTED
        if not self.pieces:
            self._finish()
            return StepResult.EXHAUSTED

        while True:
            if self.work_idx < len(self.pieces):
                placer = self.placers[self.work_idx]
                placed = placer.next_place()

                if placed is not None:
                    self.pieces[self.work_idx] = placed
                    self.work_idx += 1

                    # Drop placers of abandoned deeper slots.
                    del self.placers[self.work_idx:]
                    if self.work_idx < len(self.pieces):
                        board = place(placer.board, placed)
                        self.placers.append(
                            Placer(board, self.pieces_orientations[self.work_idx])
                        )
                    return StepResult.STEPPED

                if self.work_idx == 0:
                    self._finish()
                    return StepResult.EXHAUSTED

                self.work_idx -= 1
                continue

            # Every slot is filled: the board is tiled.
            self._record_solution()
            self.work_idx -= 1

    def _record_solution(self) -> None:
        solution: Solution = tuple(
            tuple(canonicalize_place(piece)) for piece in self.pieces
        )
        if solution not in self._solutions:
            self._solutions[solution] = None
            logger.debug("Found solution #%d", len(self._solutions))

    def _finish(self) -> None:
        self.is_done = True
        logger.debug(f"Search exhausted with {len(self._solutions)} solutions")

    def __iter__(self) -> Solver:
        return self

    def __next__(self) -> None:
        if self.step() is StepResult.EXHAUSTED:
            raise StopIteration

    def run(self, max_steps: int | None = None) -> int:
        """Step until exhausted and return the number of steps taken.

        Raises ``StepLimitExceededError`` if *max_steps* steps were taken
        without exhausting the search.
        """
        steps = 0
        while self.step() is StepResult.STEPPED:
            steps += 1
            if max_steps is not None and steps >= max_steps:
                raise StepLimitExceededError(max_steps)
        return steps

    # ------------------------------------------------------------------ #
    #  State access
    # ------------------------------------------------------------------ #

    @property
    def solutions(self) -> list[list[list[Axial]]]:
        """Solutions found so far, in discovery order."""
        return [[list(piece) for piece in solution] for solution in self._solutions]

    @property
    def solution_count(self) -> int:
        return len(self._solutions)

    def snapshot(self) -> SolverSnapshot:
        return SolverSnapshot(
            work_idx=self.work_idx,
            placed=[list(piece) for piece in self.pieces[: self.work_idx]],
            solutions=self.solutions,
            is_done=self.is_done,
        )
