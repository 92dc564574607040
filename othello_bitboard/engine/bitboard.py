from __future__ import annotations

from enum import Enum
from typing import Iterator

from .errors import OutOfRangeIndexError

# Board is 8x8, squares numbered 0..63, A1=0 (LSB) to H8=63 (MSB).
# rank = sq // 8 (0 is rank 1), file = sq % 8 (0 is file a). North is +8, East is +1.

BOARD_SQUARES = 64
FULL = 0xFFFFFFFFFFFFFFFF

# File masks to prevent horizontal wrap
FILE_A = 0x0101010101010101
FILE_H = 0x8080808080808080
NOT_FILE_A = ~FILE_A & FULL
NOT_FILE_H = ~FILE_H & FULL


class Direction(Enum):
    """Compass directions; the value is the signed bit delta of one step."""

    N = 8
    S = -8
    E = 1
    W = -1
    NE = 9
    NW = 7
    SE = -7
    SW = -9

    @property
    def delta(self) -> int:
        return self.value

    @property
    def edge_mask(self) -> int:
        return DIR_MASKS[self.value]


# Applied to the source before shifting: column H is cleared before any
# eastward step, column A before any westward step.
DIR_MASKS = {
    8: FULL,
    -8: FULL,
    1: NOT_FILE_H,
    -1: NOT_FILE_A,
    9: NOT_FILE_H,
    7: NOT_FILE_A,
    -7: NOT_FILE_H,
    -9: NOT_FILE_A,
}

DIRECTIONS = tuple(Direction)


def popcount(x: int) -> int:
    return x.bit_count()


def shift(bb: int, d: Direction) -> int:
    """Move every disc in `bb` one square toward `d`, dropping discs that leave the board."""
    delta = d.value
    bb &= DIR_MASKS[delta]
    if delta > 0:
        return (bb << delta) & FULL
    return bb >> -delta


def square_mask(sq: int) -> int:
    if isinstance(sq, bool) or not isinstance(sq, int) or not 0 <= sq < BOARD_SQUARES:
        raise OutOfRangeIndexError(sq)
    return 1 << sq


def iter_squares(bb: int) -> Iterator[int]:
    """Yield the index of every set bit, lowest first."""
    while bb:
        lsb = bb & -bb
        yield lsb.bit_length() - 1
        bb ^= lsb
