"""Operations on cell sets (pieces and boards).

A cell set is an ordered list of ``Axial`` cells without duplicates. Every
helper returns a fresh list and leaves its input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ubongo_solver.engine.axial import AXIAL_MAX, AXIAL_MIN, AXIAL_ZERO, Axial, AxialAabb

Cells = list[Axial]


def as_cells(coords: Iterable[Sequence[int]]) -> Cells:
    """Coerce ``(q, r)`` pairs into a list of ``Axial``."""
    return [Axial(int(c[0]), int(c[1])) for c in coords]


def translate(cells: Sequence[Axial], offset: Axial) -> Cells:
    return [cell + offset for cell in cells]


def rotate(cells: Sequence[Axial]) -> Cells:
    """Rotate every cell 60 degrees about the origin."""
    return [cell.rotate(AXIAL_ZERO) for cell in cells]


def rotate_many(cells: Sequence[Axial], count: int) -> Cells:
    return [cell.rotate_many(AXIAL_ZERO, count) for cell in cells]


def flip(cells: Sequence[Axial]) -> Cells:
    return [cell.flip() for cell in cells]


def cells_min(cells: Iterable[Axial]) -> Axial:
    """Component-wise minimum. ``AXIAL_MAX`` for an empty set."""
    result = AXIAL_MAX
    for cell in cells:
        result = result.min(cell)
    return result


def aabb(cells: Iterable[Axial]) -> AxialAabb:
    lo = AXIAL_MAX
    hi = AXIAL_MIN
    for cell in cells:
        lo = lo.min(cell)
        hi = hi.max(cell)
    return AxialAabb(lo, hi)


def place(board: Sequence[Axial], piece: Iterable[Axial]) -> Cells:
    """Return *board* without the cells covered by *piece*, order preserved."""
    covered = set(piece)
    return [cell for cell in board if cell not in covered]


def canonicalize_place(cells: Iterable[Axial]) -> Cells:
    """Sort by packed key. Two cell sets are equal iff their place forms are."""
    return sorted(cells, key=Axial.key)


def canonicalize_shape(cells: Sequence[Axial]) -> Cells:
    """Move the component-wise minimum to the origin, then sort."""
    lo = cells_min(cells)
    return canonicalize_place(cell - lo for cell in cells)
