"""Tests for square geometry: coordinates, alignment and line tracing."""

import pytest

from chessmetrics.analysis.constants import SQUARE_ORDER
from chessmetrics.analysis.geometry import (
    are_aligned,
    are_on_same_line,
    direction,
    distance,
    from_coordinates,
    same_diagonal,
    same_file,
    same_rank,
    squares_between,
    to_coordinates,
)


class TestCoordinates:
    def test_corners(self):
        assert to_coordinates("a1") == (0, 0)
        assert to_coordinates("h8") == (7, 7)
        assert to_coordinates("a8") == (0, 7)

    def test_center(self):
        assert to_coordinates("e4") == (4, 3)
        assert from_coordinates(4, 3) == "e4"

    def test_bijective(self):
        coords = {to_coordinates(sq) for sq in SQUARE_ORDER}
        assert len(coords) == 64
        for sq in SQUARE_ORDER:
            assert from_coordinates(*to_coordinates(sq)) == sq


class TestAlignment:
    @pytest.mark.parametrize("a,b", [("e4", "e8"), ("a4", "h4"), ("a1", "h8"), ("h1", "a8"), ("c4", "b3")])
    def test_aligned(self, a, b):
        assert are_aligned(a, b) is True

    @pytest.mark.parametrize("a,b", [("a1", "b3"), ("e4", "f6"), ("b1", "c3")])
    def test_not_aligned(self, a, b):
        assert are_aligned(a, b) is False

    def test_same_square_is_trivially_aligned(self):
        assert are_aligned("d4", "d4") is True

    def test_rank_file_diagonal_helpers(self):
        assert same_rank("a4", "g4") is True
        assert same_file("e1", "e8") is True
        assert same_diagonal("c1", "h6") is True
        assert same_diagonal("d4", "d4") is False
        assert same_diagonal("e1", "e8") is False


class TestSameLine:
    def test_rank(self):
        assert are_on_same_line("c4", "f4", "g4") is True

    def test_file(self):
        assert are_on_same_line("e1", "e2", "e8") is True

    def test_diagonal(self):
        assert are_on_same_line("a1", "d4", "h8") is True

    def test_two_crossing_diagonals_rejected(self):
        """a1-c3 and c3-e1 are both diagonal, but a1 and e1 are not."""
        assert are_on_same_line("a1", "c3", "e1") is False

    def test_mixed_lines_rejected(self):
        # b3-c4 is diagonal, c4-f4 is a rank
        assert are_on_same_line("b3", "c4", "f4") is False


class TestSquaresBetween:
    def test_diagonal_in_order(self):
        assert squares_between("a1", "d4") == ["b2", "c3"]
        assert squares_between("d4", "a1") == ["c3", "b2"]

    def test_rank(self):
        assert squares_between("c4", "g4") == ["d4", "e4", "f4"]

    def test_file_downward(self):
        assert squares_between("e8", "e5") == ["e7", "e6"]

    def test_adjacent_is_empty(self):
        assert squares_between("e1", "e2") == []
        assert squares_between("e1", "f2") == []

    def test_not_aligned_is_empty(self):
        assert squares_between("a1", "b3") == []

    def test_identical_is_empty(self):
        assert squares_between("e4", "e4") == []

    def test_endpoints_excluded(self):
        between = squares_between("a1", "h8")
        assert "a1" not in between
        assert "h8" not in between
        assert len(between) == 6


class TestDistanceDirection:
    def test_distance(self):
        assert distance("a1", "h8") == 7
        assert distance("e4", "f6") == 2
        assert distance("e4", "e4") == 0

    def test_direction(self):
        assert direction("e4", "c2") == (-1, -1)
        assert direction("e4", "e8") == (0, 1)
        assert direction("a1", "h1") == (1, 0)
