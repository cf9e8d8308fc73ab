from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from ubongo_solver.engine.axial import Axial

if TYPE_CHECKING:
    from ubongo_solver.engine.solver import Solver

# --- Solutions ---
# One placed piece, place-canonical.
PlacedPiece = tuple[Axial, ...]
# Every piece of a game, in game piece order.
Solution = tuple[PlacedPiece, ...]


# --- Puzzle definition ---
class Game(BaseModel):
    """A board plus the pieces that must tile it, placed in list order."""

    board: list[Axial] = Field(default_factory=list)
    pieces: list[list[Axial]] = Field(default_factory=list)

    def solver(self) -> Solver:
        from ubongo_solver.engine.solver import Solver

        return Solver(self)


# --- Step interface ---
class StepResult(str, Enum):
    STEPPED = "stepped"
    EXHAUSTED = "exhausted"


class SolverSnapshot(BaseModel):
    """Read-only copy of the search state between two steps."""

    model_config = ConfigDict(frozen=True)

    work_idx: int
    placed: list[list[Axial]]
    solutions: list[list[list[Axial]]]
    is_done: bool = False

    @property
    def working_piece(self) -> int | None:
        """Index of the most recently placed piece, if any."""
        return self.work_idx - 1 if self.work_idx > 0 else None
