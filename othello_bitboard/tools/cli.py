from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable, Dict, List, Optional

from othello_bitboard.engine.board import BLACK
from othello_bitboard.engine.errors import EngineError
from othello_bitboard.engine.game import GameSession
from othello_bitboard.engine.notation import coord_to_notation, string_to_moves
from othello_bitboard.engine.render import render_position
from othello_bitboard.logging_setup import setup_logging
from othello_bitboard.tools.diag import load_config

HELP = "Enter a square (e.g. f5), 'pass', 'moves' or 'quit'."


def _side_name(stm: int) -> str:
    return "Black" if stm == BLACK else "White"


def run_game(
    session: GameSession,
    cfg: Dict[str, Any],
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Interactive loop; returns 0 when the game ends, 1 when the player quits."""
    logger = logging.getLogger(__name__)
    show_legal = cfg.get("game", {}).get("show_legal_moves", True)
    symbols = cfg.get("render", {})

    write(HELP)
    while not session.is_over:
        write(render_position(session.position, show_legal=show_legal, symbols=symbols))
        side = _side_name(session.side_to_move)
        if session.position.must_pass():
            write(f"{side} has no legal move and must pass.")
        try:
            line = read(f"{side}> ").strip().lower()
        except EOFError:
            return 1
        if line in ("quit", "exit", "q"):
            return 1
        if line == "moves":
            write(" ".join(coord_to_notation(sq) for sq in session.legal_moves()) or "(none)")
            continue
        try:
            if line in ("pass", "--"):
                session.pass_turn()
            else:
                session.play_notation(line)
        except EngineError as e:
            logger.info("rejected input %r: %s", line, e)
            write(f"Illegal move: {line}")
        except ValueError as e:
            logger.info("unparsable input %r: %s", line, e)
            write(f"Could not read '{line}'. {HELP}")

    write(render_position(session.position, show_legal=False, symbols=symbols))
    res = session.result()
    if res.winner is None:
        write(f"Draw {res.black}-{res.white}.")
    else:
        write(f"{_side_name(res.winner)} wins {max(res.black, res.white)}-{min(res.black, res.white)}.")
    write(f"Moves: {res.moves}")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    p = argparse.ArgumentParser(prog="othello-play", description="Two-player Othello on the terminal")
    p.add_argument("--config", default=None, help="Path to a TOML config file")
    p.add_argument("--moves", default="", help="Move sequence to replay first, e.g. f5d6c3")
    p.add_argument("--log-level", default=None, help="Override [logging] level")
    p.add_argument("--no-legal", action="store_true", help="Do not mark legal moves on the board")
    args = p.parse_args(argv)

    cfg = load_config(args.config)
    log_cfg = cfg.get("logging", {})
    setup_logging(
        overwrite=log_cfg.get("overwrite", True),
        level=args.log_level or log_cfg.get("level", "INFO"),
        log_path=log_cfg.get("file") or None,
    )
    if args.no_legal:
        cfg.setdefault("game", {})["show_legal_moves"] = False

    # replayed sequences spell out their own passes
    session = GameSession(auto_pass=False)
    try:
        for sq in string_to_moves(args.moves):
            if sq is None:
                session.pass_turn()
            else:
                session.play(sq)
    except (EngineError, ValueError) as e:
        logging.getLogger(__name__).error("bad --moves %r: %s", args.moves, e)
        p.error(f"--moves: {e}")
    session.auto_pass = cfg.get("game", {}).get("auto_pass", True)
    if session.auto_pass:
        session.pass_if_forced()
    logging.getLogger(__name__).info("Starting game after %s replayed moves", len(session.history))
    sys.exit(run_game(session, cfg))


if __name__ == "__main__":
    main()
