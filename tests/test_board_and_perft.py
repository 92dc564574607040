import pytest

from othello_bitboard.engine.board import BLACK, WHITE, START_BLACK, START_WHITE, Position
from othello_bitboard.engine.errors import IllegalMoveError, InvalidOverlapError
from othello_bitboard.engine.perft import perft, play_moves


def test_perft_depths():
    b = Position.initial()
    assert perft(b, 0) == 1
    assert perft(b, 1) == 4
    assert perft(b, 2) == 12
    assert perft(b, 3) == 56
    # Classical Othello perft counts from start
    assert perft(b, 4) == 244
    assert perft(b, 5) == 1396
    assert perft(b, 6) == 8200


def test_perft_counts_forced_pass_as_one_edge():
    # white (to move) has no move, black answers with c1 and the game ends
    p = Position.from_masks(black=1 << 0, white=1 << 1, stm=WHITE)
    assert perft(p, 1) == 1
    assert perft(p, 2) == 1
    assert perft(p, 5) == 1


def test_initial_position():
    p = Position.initial()
    assert p.stm == BLACK
    assert p.counts() == (2, 2)
    assert p.black & p.white == 0
    assert p.legal_squares() == [19, 26, 37, 44]
    assert not p.terminal()
    assert p.winner() is None
    assert p.empties().bit_count() == 60


def test_apply_swaps_side_and_keeps_original():
    p = Position.initial()
    q = p.apply(19)
    assert q.stm == WHITE
    assert q.black == START_BLACK | (1 << 19) | (1 << 27)
    assert q.white == START_WHITE & ~(1 << 27)
    assert p == Position.initial()
    r = q.apply(18)  # c3 for white
    assert r.stm == BLACK
    assert r.counts() == (3, 3)


def test_apply_illegal_raises():
    with pytest.raises(IllegalMoveError):
        Position.initial().apply(0)


def test_from_masks_validates():
    with pytest.raises(InvalidOverlapError):
        Position.from_masks(1, 1)
    with pytest.raises(ValueError):
        Position.from_masks(1, 2, stm=2)


def test_pass_and_terminal():
    p = Position.from_masks(black=1 << 0, white=1 << 1, stm=WHITE)
    assert p.must_pass()
    assert not p.terminal()
    q = p.pass_move()
    assert q.stm == BLACK
    assert q.legal_squares() == [2]
    end = q.apply(2)
    assert end.terminal()
    assert end.counts() == (3, 0)
    assert end.winner() == BLACK
    assert end.score_disc_diff() == 3


def test_draw_has_no_winner():
    # full board split evenly
    p = Position.from_masks(black=0x00000000FFFFFFFF, white=0xFFFFFFFF00000000)
    assert p.terminal()
    assert p.winner() is None
    assert p.score_disc_diff() == 0


def test_play_moves_sequence():
    p = play_moves(None, ["f5", "d6", "c3"])
    assert p.stm == WHITE
    assert p.counts() == (5, 2)
    # d5 and d6 are white
    assert p.white == (1 << 35) | (1 << 43)


def test_play_moves_accepts_parsed_squares():
    assert play_moves(None, [37, 43, 18]) == play_moves(None, ["f5", "d6", "c3"])
    stuck = Position.from_masks(black=1 << 0, white=1 << 1, stm=WHITE)
    assert play_moves(stuck, [None, 2]).counts() == (3, 0)


def test_play_moves_rejects_unforced_pass():
    with pytest.raises(ValueError):
        play_moves(None, ["--"])
