"""Exact-cover solver for hexagonal tiling puzzles."""

from ubongo_solver.engine.axial import Axial
from ubongo_solver.engine.models import Game, SolverSnapshot, StepResult
from ubongo_solver.engine.solver import Solver
from ubongo_solver.engine.traced import TracedSolver

__all__ = ["Axial", "Game", "Solver", "SolverSnapshot", "StepResult", "TracedSolver"]
