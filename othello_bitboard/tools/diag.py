from __future__ import annotations

import copy
import logging
import os
import pathlib
import time
from typing import Any, Dict, Optional, Union

import orjson
import tomli

CONFIG_HOME = pathlib.Path(os.path.expanduser("~/.othello_bitboard"))
CONFIG_PATH = CONFIG_HOME / "config.toml"
DEFAULTS_PATH = pathlib.Path(__file__).resolve().parents[1] / "config" / "defaults.toml"


def ensure_config(config_path: pathlib.Path = CONFIG_PATH) -> bool:
    """Write the packaged defaults to `config_path` if it does not exist yet."""
    config_path.parent.mkdir(parents=True, exist_ok=True)
    if not config_path.exists():
        config_path.write_text(DEFAULTS_PATH.read_text(encoding="utf-8"), encoding="utf-8")
        logging.getLogger(__name__).info("Initialised configuration at %s", config_path)
        return True
    return False


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def load_config(config_path: Optional[Union[str, pathlib.Path]] = None) -> Dict[str, Any]:
    """Packaged defaults overlaid with the user config.

    Without an explicit path the user file in CONFIG_HOME is created on first
    use. An explicit path that does not exist is an error.
    """
    with open(DEFAULTS_PATH, "rb") as f:
        defaults = tomli.load(f)
    if config_path is None:
        ensure_config(CONFIG_PATH)
        path = CONFIG_PATH
    else:
        path = pathlib.Path(config_path)
    try:
        with open(path, "rb") as f:
            user = tomli.load(f)
    except FileNotFoundError:
        logging.getLogger(__name__).error("Config file not found: %s", path)
        raise
    except tomli.TOMLDecodeError as e:
        logging.getLogger(__name__).error("Error parsing config %s: %s", path, e)
        raise
    return _merge(defaults, user)


def log_event(module: str, event: str, **kwargs) -> None:
    """Structured event logging through the central logger.

    Emits a single JSON line via the Python logging system so it reaches the
    log file configured by logging_setup.setup_logging().
    """
    payload = {"ts": time.time(), "module": module, "event": event}
    payload.update(kwargs)
    line = orjson.dumps(payload).decode("utf-8")
    logging.getLogger(f"event.{module}").info(line)
