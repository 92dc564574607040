"""Turn bookkeeping around the bitboard core.

The session owns the current Position between turns; the core functions
never see a turn flag. A side with no legal move passes, and the game ends
when neither side can move.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .bitboard import popcount
from .board import BLACK, WHITE, Position
from .errors import IllegalMoveError
from .notation import PASS_NOTATION, coord_to_notation, moves_to_string, notation_to_coord
from ..tools.diag import log_event


@dataclass(frozen=True)
class GameResult:
    black: int
    white: int
    winner: Optional[int]  # BLACK, WHITE or None for a draw
    moves: str


class GameSession:
    def __init__(self, position: Optional[Position] = None, auto_pass: bool = True) -> None:
        self.auto_pass = auto_pass
        self._start = position or Position.initial()
        self.position = self._start
        self.history: List[Optional[int]] = []  # None marks a pass
        self._finished_logged = False
        if auto_pass:
            self.pass_if_forced()

    @property
    def side_to_move(self) -> int:
        return self.position.stm

    @property
    def is_over(self) -> bool:
        return self.position.terminal()

    def legal_moves(self) -> List[int]:
        return self.position.legal_squares()

    def reset(self) -> None:
        self.position = self._start
        self.history = []
        self._finished_logged = False
        log_event("game", "reset")
        if self.auto_pass:
            self.pass_if_forced()

    def play(self, sq: int) -> Position:
        """Play `sq` for the side to move; IllegalMoveError leaves the session untouched."""
        before = self.position
        after = before.apply(sq)
        self.position = after
        self.history.append(sq)
        flipped = popcount(before.me_opp()[1] ^ after.me_opp()[0])
        log_event(
            "game",
            "move",
            ply=len(self.history),
            side="black" if before.stm == BLACK else "white",
            square=coord_to_notation(sq),
            flipped=flipped,
        )
        if self.auto_pass:
            self.pass_if_forced()
        self._log_if_finished()
        return self.position

    def play_notation(self, text: str) -> Position:
        if text.strip() == PASS_NOTATION:
            return self.pass_turn()
        return self.play(notation_to_coord(text))

    def pass_turn(self) -> Position:
        if not self.position.must_pass():
            raise IllegalMoveError(None, self.position.legal_mask())
        if self.position.terminal():
            raise IllegalMoveError(None, 0)
        self._do_pass()
        self._log_if_finished()
        return self.position

    def _do_pass(self) -> None:
        side = "black" if self.position.stm == BLACK else "white"
        self.position = self.position.pass_move()
        self.history.append(None)
        log_event("game", "pass", ply=len(self.history), side=side)

    def pass_if_forced(self) -> bool:
        """Pass for the side to move if it has no move but the game goes on."""
        if self.position.must_pass() and not self.position.terminal():
            self._do_pass()
            return True
        return False

    def _log_if_finished(self) -> None:
        if self.is_over and not self._finished_logged:
            self._finished_logged = True
            res = self.result()
            log_event("game", "over", black=res.black, white=res.white, winner=res.winner, moves=res.moves)

    def result(self) -> GameResult:
        b, w = self.position.counts()
        winner = None
        if b > w:
            winner = BLACK
        elif w > b:
            winner = WHITE
        return GameResult(b, w, winner, moves_to_string(self.history))
