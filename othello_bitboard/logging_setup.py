from __future__ import annotations

import logging
import pathlib
import sys
import threading
import traceback
from typing import Optional, Union


LOG_FILE_NAME = "othello-bitboard.log"


def get_log_path() -> pathlib.Path:
    return pathlib.Path.cwd() / LOG_FILE_NAME


def setup_logging(
    overwrite: bool = True,
    level: Union[int, str] = logging.INFO,
    log_path: Optional[Union[str, pathlib.Path]] = None,
) -> None:
    """Configure root logging to a single file plus stderr.

    - Overwrites the log file on first setup (per process) if overwrite is True
    - Installs sys.excepthook and threading excepthook
    - Captures warnings via logging
    """
    root_logger = logging.getLogger()
    # Prevent duplicate handlers on re-entry
    if getattr(root_logger, "_ob_logging_configured", False):
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {level}")

    path = pathlib.Path(log_path) if log_path else get_log_path()
    fmt = "%(asctime)s.%(msecs)03d %(levelname)s [%(process)d:%(threadName)s] %(name)s - %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    file_handler = logging.FileHandler(path, mode="w" if overwrite else "a", encoding="utf-8")
    file_handler.setFormatter(formatter)

    # stderr only gets warnings so the board drawn on stdout stays readable
    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.setLevel(logging.WARNING)

    logging.basicConfig(level=level, handlers=[file_handler, stderr_handler], force=True)
    root_logger._ob_logging_configured = True  # type: ignore[attr-defined]

    logging.captureWarnings(True)

    sys.excepthook = _log_unhandled_exception  # type: ignore[assignment]
    threading.excepthook = _log_thread_exception


def reset_logging() -> None:
    """Drop handlers installed by setup_logging so it can run again (tests)."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger._ob_logging_configured = False  # type: ignore[attr-defined]
    root_logger.setLevel(logging.WARNING)
    sys.excepthook = sys.__excepthook__
    threading.excepthook = threading.__excepthook__


def _log_unhandled_exception(exc_type, exc_value, exc_tb) -> None:  # type: ignore[no-untyped-def]
    logger = logging.getLogger("unhandled")
    tb_str = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    logger.critical("Unhandled exception:\n%s", tb_str)


def _log_thread_exception(args) -> None:  # type: ignore[no-untyped-def]
    logger = logging.getLogger("thread")
    tb_str = "".join(traceback.format_exception(args.exc_type, args.exc_value, args.exc_traceback))
    logger.critical("Unhandled thread exception in %s:\n%s", getattr(args, "thread", None), tb_str)
