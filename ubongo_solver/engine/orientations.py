"""Orientation variants of a polyhex piece.

The hex grid has a symmetry group of order 12: six 60-degree rotations, each
with or without a reflection. A piece is swept through all six rotations,
flipped once, and swept again. Every intermediate shape is brought into
shape-canonical form, so pieces with symmetry collapse to fewer variants.

Order of the result is rotation sweep first, then the reflected sweep, with
the piece's own canonical shape at index 0. The solver tries orientations in
this order, so it determines the order in which solutions are found.
"""

from __future__ import annotations

from collections.abc import Sequence

from ubongo_solver.engine.axial import Axial
from ubongo_solver.engine.cells import Cells, canonicalize_shape, flip, rotate

ROTATIONS = 6


def piece_orientations(piece: Sequence[Axial]) -> list[Cells]:
    """Return the distinct shape-canonical orientations of *piece*."""
    shape = canonicalize_shape(piece)
    orientations: list[Cells] = [shape]

    for flipped in (False, True):
        if flipped:
            shape = canonicalize_shape(flip(shape))
            if shape not in orientations:
                orientations.append(shape)
        for _ in range(ROTATIONS):
            shape = canonicalize_shape(rotate(shape))
            if shape not in orientations:
                orientations.append(shape)

    return orientations
