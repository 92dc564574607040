"""
Coordinate notation for Othello moves.

Squares 0-63 map to 'a1'..'h8' with a1=0, file = sq % 8 and rank = sq // 8 + 1.
Move lists are written as concatenated pairs (e.g. 'f5d6c3'), with '--' for a pass.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .errors import OutOfRangeIndexError

# Special string for pass moves (no available moves)
PASS_NOTATION = '--'

FILES = "abcdefgh"


def coord_to_notation(coord: int) -> str:
    """Convert board coordinate (0-63) to coordinate notation (e.g., 'e4')."""
    if isinstance(coord, bool) or not isinstance(coord, int) or coord < 0 or coord > 63:
        raise OutOfRangeIndexError(coord)
    return f"{FILES[coord % 8]}{coord // 8 + 1}"


def notation_to_coord(notation: str) -> int:
    """Convert coordinate notation (e.g., 'e4') to board coordinate (0-63)."""
    notation = notation.strip()
    if notation == PASS_NOTATION:
        raise ValueError(f"Cannot convert pass notation '{PASS_NOTATION}' to coordinate")
    if len(notation) != 2:
        raise ValueError(f"Invalid notation format: {notation}")

    file = FILES.find(notation[0].lower())
    rank_char = notation[1]
    if file < 0 or not rank_char.isdigit():
        raise ValueError(f"Invalid notation: {notation}")
    rank = int(rank_char) - 1
    if rank < 0 or rank > 7:
        raise ValueError(f"Invalid notation: {notation}")
    return rank * 8 + file


def moves_to_string(moves: Iterable[Optional[int]]) -> str:
    """Convert moves to a notation string; None stands for a pass."""
    return ''.join(PASS_NOTATION if m is None else coord_to_notation(m) for m in moves)


def string_to_moves(moves_str: str) -> List[Optional[int]]:
    """Parse a notation string into squares, with None for each pass."""
    moves_str = moves_str.strip()
    if len(moves_str) % 2:
        raise ValueError(f"Incomplete move in: {moves_str}")
    moves: List[Optional[int]] = []
    for i in range(0, len(moves_str), 2):
        pair = moves_str[i:i + 2]
        moves.append(None if pair == PASS_NOTATION else notation_to_coord(pair))
    return moves
