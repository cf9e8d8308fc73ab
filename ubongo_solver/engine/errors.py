from __future__ import annotations


class SolverError(Exception):
    """Base class for solver errors."""
    pass


class PuzzleLoadError(SolverError):
    """A puzzle definition could not be read or parsed."""

    def __init__(self, message: str, source: str | None = None):
        self.message = message
        self.source = source
        super().__init__(message)


class StepLimitExceededError(SolverError):
    """A bounded run did not exhaust the search space."""

    def __init__(self, max_steps: int):
        self.max_steps = max_steps
        super().__init__(f"steps count exceeded {max_steps}")
