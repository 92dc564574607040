from __future__ import annotations

from typing import Iterable, Optional, Union

from .bitboard import iter_squares
from .board import Position
from .notation import PASS_NOTATION, notation_to_coord


def perft(pos: Position, depth: int) -> int:
    """Count move paths of length `depth`; a forced pass is one edge, game end is a leaf."""
    if depth == 0:
        return 1
    mask = pos.legal_mask()
    if mask == 0:
        passed = pos.pass_move()
        if passed.legal_mask() == 0:
            return 1
        return perft(passed, depth - 1)
    total = 0
    for sq in iter_squares(mask):
        total += perft(pos.apply(sq), depth - 1)
    return total


def play_moves(pos: Optional[Position], moves: Iterable[Union[str, int, None]]) -> Position:
    """Replay notation strings or parsed squares (None for a pass)."""
    p = Position.initial() if pos is None else pos
    for mv in moves:
        if isinstance(mv, str):
            mv = None if mv == PASS_NOTATION else notation_to_coord(mv)
        if mv is None:
            if not p.must_pass():
                raise ValueError("pass is only allowed when no move is available")
            p = p.pass_move()
            continue
        p = p.apply(mv)
    return p
