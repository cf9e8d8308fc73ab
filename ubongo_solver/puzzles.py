"""Loading puzzle definitions and exporting solutions.

A puzzle file is JSON of the form::

    {"board": [[q, r], ...], "pieces": [[[q, r], ...], ...]}

A few example puzzles ship in ``ubongo_solver/data``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from importlib import resources
from pathlib import Path

from pydantic import ValidationError

from ubongo_solver.engine.errors import PuzzleLoadError
from ubongo_solver.engine.models import Game

logger = logging.getLogger(__name__)

_DATA_PACKAGE = "ubongo_solver"
_DATA_DIR = "data"


def parse_game(text: str | bytes, source: str | None = None) -> Game:
    try:
        return Game.model_validate_json(text)
    except ValidationError as e:
        raise PuzzleLoadError(f"Invalid puzzle definition: {e}", source) from e


def load_game(path: str | Path) -> Game:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise PuzzleLoadError(f"Cannot read puzzle file {path}: {e}", str(path)) from e
    game = parse_game(text, source=str(path))
    logger.debug(f"Loaded {path}: {len(game.board)} cells, {len(game.pieces)} pieces")
    return game


def _data_dir():
    return resources.files(_DATA_PACKAGE).joinpath(_DATA_DIR)


def list_examples() -> list[str]:
    """Names of the bundled example puzzles, sorted."""
    return sorted(
        entry.name.removesuffix(".json")
        for entry in _data_dir().iterdir()
        if entry.name.endswith(".json")
    )


def load_example(name: str) -> Game:
    entry = _data_dir().joinpath(f"{name}.json")
    if not entry.is_file():
        raise PuzzleLoadError(
            f"Unknown example {name!r}. Available: {', '.join(list_examples())}",
            name,
        )
    return parse_game(entry.read_text(encoding="utf-8"), source=name)


def solutions_to_json(solutions: Sequence[Sequence[Sequence[Sequence[int]]]]) -> str:
    """Compact JSON: ``[[[[q, r], ...] per piece] per solution]``."""
    payload = [
        [[[cell[0], cell[1]] for cell in piece] for piece in solution]
        for solution in solutions
    ]
    return json.dumps(payload, separators=(",", ":"))
