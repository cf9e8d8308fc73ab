"""Tests for wiggle-box candidates and the per-slot placer."""

from __future__ import annotations

from ubongo_solver.engine.axial import Axial
from ubongo_solver.engine.cells import as_cells
from ubongo_solver.engine.orientations import piece_orientations
from ubongo_solver.engine.placer import Placer, WiggleBox, spot_candidates, spots

LINE3 = as_cells([(0, 0), (1, 0), (2, 0)])
RHOMBUS = as_cells([(0, 0), (1, 0), (0, 1), (1, 1)])
DOMINO = as_cells([(0, 0), (1, 0)])


class TestSpotCandidates:
    def test_single_cell_on_line(self) -> None:
        assert list(spot_candidates(LINE3, as_cells([(0, 0)]))) == as_cells([(0, 0), (1, 0), (2, 0)])

    def test_scan_order_is_q_outer(self) -> None:
        assert list(spot_candidates(RHOMBUS, as_cells([(0, 0)]))) == as_cells(
            [(0, 0), (0, 1), (1, 0), (1, 1)]
        )

    def test_offsets_account_for_both_minimums(self) -> None:
        board = as_cells([(5, 5), (6, 5)])
        piece = as_cells([(1, 1)])
        assert list(spot_candidates(board, piece)) == as_cells([(4, 4), (5, 4)])

    def test_piece_larger_than_board(self) -> None:
        assert list(spot_candidates(DOMINO, LINE3)) == []

    def test_empty_inputs(self) -> None:
        assert list(spot_candidates([], DOMINO)) == []
        assert list(spot_candidates(LINE3, [])) == []

    def test_wiggle_box_indexing_matches_iteration(self) -> None:
        box = WiggleBox(as_cells([(0, 0), (3, 2)]), DOMINO)
        assert len(box) == 9
        assert [box[i] for i in range(len(box))] == list(box)


class TestSpots:
    def test_rejects_cells_off_board(self) -> None:
        triangle = as_cells([(0, 0), (1, 0), (0, 1)])
        assert list(spot_candidates(triangle, DOMINO)) == as_cells([(0, 0), (0, 1)])
        assert list(spots(triangle, DOMINO)) == as_cells([(0, 0)])

    def test_every_spot_lies_on_board(self) -> None:
        board = set(RHOMBUS)
        for offset in spots(RHOMBUS, DOMINO):
            assert all(cell + offset in board for cell in DOMINO)


class TestPlacer:
    def test_walks_orientations_in_order(self) -> None:
        placer = Placer(RHOMBUS, piece_orientations(DOMINO))
        placements = []
        while (placed := placer.next_place()) is not None:
            placements.append(placed)
        assert placements == [
            as_cells([(0, 0), (1, 0)]),
            as_cells([(0, 1), (1, 1)]),
            as_cells([(1, 0), (0, 1)]),
            as_cells([(0, 0), (0, 1)]),
            as_cells([(1, 0), (1, 1)]),
        ]

    def test_stays_exhausted(self) -> None:
        placer = Placer(DOMINO, piece_orientations(DOMINO))
        assert placer.next_place() == DOMINO
        assert placer.next_place() is None
        assert placer.is_exhausted
        assert placer.next_place() is None

    def test_piece_that_never_fits(self) -> None:
        placer = Placer(DOMINO, piece_orientations(LINE3))
        assert placer.next_place() is None

    def test_empty_board(self) -> None:
        assert Placer([], piece_orientations(DOMINO)).next_place() is None

    def test_empty_piece(self) -> None:
        assert Placer(LINE3, piece_orientations([])).next_place() is None

    def test_placement_is_translated_orientation(self) -> None:
        board = as_cells([(10, -4), (11, -4)])
        placer = Placer(board, piece_orientations(DOMINO))
        assert placer.next_place() == [Axial(10, -4), Axial(11, -4)]
