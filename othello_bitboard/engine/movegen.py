from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .bitboard import DIRECTIONS, FULL, shift, square_mask
from .errors import EngineError, IllegalMoveError, InvalidMaskError, InvalidOverlapError


def check_masks(own: int, opp: int) -> None:
    for bb in (own, opp):
        if isinstance(bb, bool) or not isinstance(bb, int) or bb < 0 or bb > FULL:
            raise InvalidMaskError(bb)
    if own & opp:
        raise InvalidOverlapError(own, opp)


def _run(start: int, opp: int, d) -> int:
    # Longest run of opponent discs on an 8-wide board is 6: one step plus 5 extensions.
    t = shift(start, d) & opp
    t |= shift(t, d) & opp
    t |= shift(t, d) & opp
    t |= shift(t, d) & opp
    t |= shift(t, d) & opp
    t |= shift(t, d) & opp
    return t


def legal_moves(own: int, opp: int) -> int:
    """Return bitmask of legal moves for side with discs `own` against `opp`.

    Zero means the side has to pass (or the game is over if the other side
    cannot move either).
    """
    check_masks(own, opp)
    empty = ~(own | opp) & FULL
    moves = 0
    for d in DIRECTIONS:
        moves |= shift(_run(own, opp, d), d) & empty
    return moves


def _captures(own: int, opp: int, move: int) -> int:
    flips = 0
    for d in DIRECTIONS:
        run = _run(move, opp, d)
        # bracketed by a disc that was already ours before the move
        if shift(run, d) & own:
            flips |= run
    return flips


def flip_mask(own: int, opp: int, sq: int) -> int:
    """Discs that playing `sq` would turn over; 0 if nothing is captured."""
    move = square_mask(sq)
    check_masks(own, opp)
    if move & (own | opp):
        return 0
    return _captures(own, opp, move)


def resolve(own: int, opp: int, sq: int) -> Tuple[int, int]:
    """Play `sq` for `own` and return the new ``(own, opp)`` pair.

    Raises OutOfRangeIndexError, InvalidMaskError / InvalidOverlapError or
    IllegalMoveError; the inputs are never modified.
    """
    move = square_mask(sq)
    check_masks(own, opp)
    flips = 0 if move & (own | opp) else _captures(own, opp, move)
    if flips == 0:
        raise IllegalMoveError(sq, legal_moves(own, opp))
    own2 = (own | move) ^ flips
    opp2 = opp ^ flips
    return own2, opp2


@dataclass(frozen=True)
class Resolution:
    ok: bool
    own: int
    opponent: int
    flipped: int = 0
    error: Optional[EngineError] = None


def try_resolve(own: int, opp: int, sq: int) -> Resolution:
    """Like `resolve` but reports failure as a value instead of raising."""
    try:
        own2, opp2 = resolve(own, opp, sq)
    except EngineError as e:
        return Resolution(False, own, opp, 0, e)
    return Resolution(True, own2, opp2, opp ^ opp2)
