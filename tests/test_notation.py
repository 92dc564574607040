"""
Tests for the coordinate notation system.
"""

import pytest

from othello_bitboard.engine.errors import OutOfRangeIndexError
from othello_bitboard.engine.notation import (
    PASS_NOTATION,
    coord_to_notation,
    moves_to_string,
    notation_to_coord,
    string_to_moves,
)


class TestCoordinateNotation:
    """Test coordinate notation conversion functions."""

    def test_coord_to_notation(self):
        assert coord_to_notation(0) == "a1"
        assert coord_to_notation(7) == "h1"
        assert coord_to_notation(56) == "a8"
        assert coord_to_notation(63) == "h8"

        # starting block
        assert coord_to_notation(27) == "d4"
        assert coord_to_notation(28) == "e4"
        assert coord_to_notation(35) == "d5"
        assert coord_to_notation(36) == "e5"

    def test_notation_to_coord(self):
        assert notation_to_coord("a1") == 0
        assert notation_to_coord("h8") == 63
        assert notation_to_coord("d3") == 19
        assert notation_to_coord("C4") == 26
        assert notation_to_coord(" f5 ") == 37

    def test_round_trip_all_squares(self):
        for sq in range(64):
            assert notation_to_coord(coord_to_notation(sq)) == sq

    def test_invalid_coordinates(self):
        for bad in (-1, 64, 100, True, False, 3.0):
            with pytest.raises(OutOfRangeIndexError):
                coord_to_notation(bad)
        # still a ValueError for callers that only know the builtin
        with pytest.raises(ValueError):
            coord_to_notation(64)

    def test_invalid_notation(self):
        for bad in ("x9", "a9", "i1", "a0", "abc", "", "1a"):
            with pytest.raises(ValueError):
                notation_to_coord(bad)
        with pytest.raises(ValueError):
            notation_to_coord(PASS_NOTATION)


class TestMoveStrings:
    def test_moves_to_string(self):
        assert moves_to_string([]) == ""
        assert moves_to_string([37, 43, 18]) == "f5d6c3"
        assert moves_to_string([37, None, 18]) == "f5--c3"

    def test_string_to_moves(self):
        assert string_to_moves("") == []
        assert string_to_moves("f5d6c3") == [37, 43, 18]
        assert string_to_moves("F5--c3") == [37, None, 18]

    def test_string_to_moves_rejects_garbage(self):
        with pytest.raises(ValueError):
            string_to_moves("f5d")
        with pytest.raises(ValueError):
            string_to_moves("f5z9")
