from __future__ import annotations

import argparse
import logging
from time import perf_counter
from typing import List, Optional

from othello_bitboard.engine.errors import EngineError
from othello_bitboard.engine.notation import string_to_moves
from othello_bitboard.engine.perft import perft, play_moves
from othello_bitboard.logging_setup import setup_logging


def main(argv: Optional[List[str]] = None) -> None:
    p = argparse.ArgumentParser(prog="othello-perft")
    p.add_argument("--depth", type=int, required=True)
    p.add_argument("--position", type=str, default=None, help="move sequence from the start, like f5d6c3")
    p.add_argument("--log-level", default="WARNING")
    args = p.parse_args(argv)

    setup_logging(overwrite=False, level=args.log_level)
    if args.depth < 0:
        p.error("--depth must be >= 0")

    try:
        b = play_moves(None, string_to_moves(args.position or ""))
    except (EngineError, ValueError) as e:
        logging.getLogger(__name__).error("bad --position %r: %s", args.position, e)
        p.error(f"--position: {e}")
    t0 = perf_counter()
    n = perft(b, args.depth)
    dt = perf_counter() - t0
    logging.getLogger(__name__).info("perft depth=%s moves=%s nodes=%s time=%.3fs", args.depth, args.position, n, dt)
    print(f"perft(d={args.depth})={n} in {dt:.3f}s")


if __name__ == "__main__":
    main()
