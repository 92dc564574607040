from __future__ import annotations

from typing import Dict, Optional

from .board import BLACK, Position
from .notation import FILES

DEFAULT_SYMBOLS = {"black": "X", "white": "O", "empty": ".", "legal": "*"}


def render_mask(bb: int) -> str:
    """8x8 grid of 0/1, rank 8 on top and file a on the left."""
    rows = []
    for rank in range(7, -1, -1):
        rows.append("".join(str((bb >> (rank * 8 + f)) & 1) for f in range(8)))
    return "\n".join(rows)


def render_position(pos: Position, show_legal: bool = True, symbols: Optional[Dict[str, str]] = None) -> str:
    sym = dict(DEFAULT_SYMBOLS)
    if symbols:
        sym.update(symbols)
    legal = pos.legal_mask() if show_legal else 0
    header = "  " + " ".join(FILES)
    lines = [header]
    for rank in range(7, -1, -1):
        cells = []
        for f in range(8):
            bit = 1 << (rank * 8 + f)
            if pos.black & bit:
                cells.append(sym["black"])
            elif pos.white & bit:
                cells.append(sym["white"])
            elif legal & bit:
                cells.append(sym["legal"])
            else:
                cells.append(sym["empty"])
        lines.append(f"{rank + 1} {' '.join(cells)} {rank + 1}")
    lines.append(header)
    b, w = pos.counts()
    side = "black" if pos.stm == BLACK else "white"
    lines.append(f"{sym['black']} black: {b}  {sym['white']} white: {w}  to move: {side}")
    return "\n".join(lines)
