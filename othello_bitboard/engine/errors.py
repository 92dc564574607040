"""Errors raised by the bitboard core.

All of them derive from ``ValueError`` so callers that only guard against
bad input can keep catching that.
"""

from __future__ import annotations

from typing import Optional


class EngineError(ValueError):
    pass


class InvalidMaskError(EngineError):
    """A disc mask is not an int, is negative, or is wider than 64 bits."""

    def __init__(self, mask: int) -> None:
        super().__init__(f"not a 64-bit disc mask: {mask!r}")
        self.mask = mask


class InvalidOverlapError(EngineError):
    """Both sides claim the same square."""

    def __init__(self, own: int, opponent: int) -> None:
        super().__init__(f"own and opponent masks overlap: 0x{own & opponent:016x}")
        self.own = own
        self.opponent = opponent
        self.overlap = own & opponent


class IllegalMoveError(EngineError):
    """The square is occupied or the placement captures nothing."""

    def __init__(self, sq: Optional[int], legal: int) -> None:
        super().__init__(f"illegal move: {'pass' if sq is None else sq}")
        self.sq = sq
        self.legal = legal


class OutOfRangeIndexError(EngineError):
    def __init__(self, sq: object) -> None:
        super().__init__(f"square index out of range 0..63: {sq!r}")
        self.sq = sq
