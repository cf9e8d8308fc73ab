"""Placement enumeration for one piece slot.

Candidate offsets for an orientation are restricted to its wiggle box: every
translation that keeps the orientation's bounding box inside the board's
bounding box. The box is scanned with the q offset in the outer loop and the
r offset in the inner loop. A candidate becomes a spot only when every
translated cell is a board cell.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from ubongo_solver.engine.axial import Axial
from ubongo_solver.engine.cells import Cells, aabb, translate


class WiggleBox:
    """The ordered candidate offsets of one orientation against one board."""

    __slots__ = ("origin", "width", "height")

    def __init__(self, board: Sequence[Axial], piece: Sequence[Axial]) -> None:
        if not board or not piece:
            self.origin = Axial(0, 0)
            self.width = 0
            self.height = 0
            return

        board_box = aabb(board)
        piece_box = aabb(piece)
        wiggle = board_box.size() - piece_box.size()
        self.origin = board_box.min - piece_box.min
        self.width = max(wiggle.q + 1, 0)
        self.height = max(wiggle.r + 1, 0)

    def __len__(self) -> int:
        return self.width * self.height

    def __getitem__(self, index: int) -> Axial:
        if not 0 <= index < len(self):
            raise IndexError(index)
        x, y = divmod(index, self.height)
        return Axial(x, y) + self.origin

    def __iter__(self) -> Iterator[Axial]:
        for x in range(self.width):
            for y in range(self.height):
                yield Axial(x, y) + self.origin


def spot_candidates(board: Sequence[Axial], piece: Sequence[Axial]) -> Iterator[Axial]:
    return iter(WiggleBox(board, piece))


def fits(board_cells: set[Axial] | frozenset[Axial], piece: Sequence[Axial], offset: Axial) -> bool:
    return all(cell + offset in board_cells for cell in piece)


def spots(board: Sequence[Axial], piece: Sequence[Axial]) -> Iterator[Axial]:
    """Lazily yield every offset at which *piece* lies fully on *board*."""
    board_cells = frozenset(board)
    for offset in spot_candidates(board, piece):
        if fits(board_cells, piece, offset):
            yield offset


class Placer:
    """Cursor over the placements of one piece on one board.

    Orientations are tried in order; within an orientation the wiggle box is
    walked with an explicit index, so the state is a pair of integers rather
    than a suspended generator.
    """

    def __init__(self, board: Sequence[Axial], orientations: Sequence[Sequence[Axial]]) -> None:
        self.board: tuple[Axial, ...] = tuple(board)
        self.orientations = orientations
        self.orientation_idx = 0
        self.offset_idx = 0
        self._board_cells = frozenset(self.board)
        self._box = WiggleBox(self.board, orientations[0]) if orientations else WiggleBox((), ())

    @property
    def is_exhausted(self) -> bool:
        return self.orientation_idx >= len(self.orientations)

    def next_place(self) -> Cells | None:
        """Return the next placement, or ``None`` when every orientation is spent."""
        while self.orientation_idx < len(self.orientations):
            piece = self.orientations[self.orientation_idx]
            box = self._box
            while self.offset_idx < len(box):
                offset = box[self.offset_idx]
                self.offset_idx += 1
                if fits(self._board_cells, piece, offset):
                    return translate(piece, offset)

            self.orientation_idx += 1
            self.offset_idx = 0
            if self.orientation_idx < len(self.orientations):
                self._box = WiggleBox(self.board, self.orientations[self.orientation_idx])

        return None
