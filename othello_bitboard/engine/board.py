from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .bitboard import FULL, iter_squares, popcount
from .movegen import check_masks, legal_moves, resolve

BLACK = 0
WHITE = 1

# d5/e4 black, d4/e5 white
START_BLACK = (1 << 28) | (1 << 35)
START_WHITE = (1 << 27) | (1 << 36)


@dataclass(frozen=True)
class Position:
    black: int
    white: int
    stm: int  # 0=Black,1=White

    @staticmethod
    def initial() -> "Position":
        return Position(black=START_BLACK, white=START_WHITE, stm=BLACK)

    @staticmethod
    def from_masks(black: int, white: int, stm: int = BLACK) -> "Position":
        check_masks(black, white)
        if stm not in (BLACK, WHITE):
            raise ValueError(f"side to move must be 0 or 1, got {stm!r}")
        return Position(black, white, stm)

    def me_opp(self) -> Tuple[int, int]:
        return (self.black, self.white) if self.stm == BLACK else (self.white, self.black)

    def legal_mask(self) -> int:
        me, opp = self.me_opp()
        return legal_moves(me, opp)

    def legal_squares(self) -> List[int]:
        return list(iter_squares(self.legal_mask()))

    def must_pass(self) -> bool:
        return self.legal_mask() == 0

    def pass_move(self) -> "Position":
        return Position(self.black, self.white, 1 - self.stm)

    def apply(self, sq: int) -> "Position":
        me, opp = self.me_opp()
        me2, opp2 = resolve(me, opp, sq)
        if self.stm == BLACK:
            return Position(me2, opp2, WHITE)
        return Position(opp2, me2, BLACK)

    def terminal(self) -> bool:
        if self.legal_mask() != 0:
            return False
        return self.pass_move().legal_mask() == 0

    def counts(self) -> Tuple[int, int]:
        return popcount(self.black), popcount(self.white)

    def empties(self) -> int:
        return ~(self.black | self.white) & FULL

    def score_disc_diff(self) -> int:
        b, w = self.counts()
        return b - w  # +ve means Black ahead

    def winner(self) -> Optional[int]:
        """BLACK or WHITE once the game is over; None for a draw or a game in progress."""
        if not self.terminal():
            return None
        diff = self.score_disc_diff()
        if diff > 0:
            return BLACK
        if diff < 0:
            return WHITE
        return None
