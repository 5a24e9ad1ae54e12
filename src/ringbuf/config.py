"""Configuration for the ringbuf command-line tool.

Settings are read from ``~/.config/ringbuf/config.json``::

    {
      "tail": {"capacity": 20, "reverse": false, "drain": false}
    }

Every key is optional; missing keys fall back to the defaults below.
A value of the wrong JSON type raises ValueError.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ringbuf.constants import (
    DEFAULT_CAPACITY,
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONFIG_DIR_ENV,
    DEFAULT_CONFIG_FILE,
    LOGGER_NAME,
)

_log = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True, slots=True)
class TailConfig:
    """How many lines to keep and how to emit them."""

    capacity: int = DEFAULT_CAPACITY
    reverse: bool = False
    drain: bool = False

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError("capacity must be at least 1")


@dataclass(frozen=True, slots=True)
class RingbufConfig:
    """Top-level configuration loaded from the config file."""

    tail: TailConfig = field(default_factory=TailConfig)


def config_dir() -> Path:
    """Directory holding the config file, honouring ``RINGBUF_CONFIG_DIR``."""
    return Path(
        os.environ.get(DEFAULT_CONFIG_DIR_ENV, "") or DEFAULT_CONFIG_DIR,
    ).expanduser()


def load_config(path: str | None = None) -> RingbufConfig:
    """Load configuration from a JSON file.

    Reads ``config.json`` from :func:`config_dir` unless *path* is given.
    Returns the defaults if the file does not exist or does not hold a
    JSON object.
    """
    config_path = (
        Path(path).expanduser() if path else config_dir() / DEFAULT_CONFIG_FILE
    )
    if not config_path.exists():
        _log.debug("No config file at %s; using defaults", config_path)
        return RingbufConfig()

    with open(config_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        _log.warning("Ignoring %s: top level is not an object", config_path)
        return RingbufConfig()

    tail_raw = data.get("tail", {})
    if not isinstance(tail_raw, dict):
        _log.warning("Ignoring 'tail' in %s: not an object", config_path)
        return RingbufConfig()

    tail = TailConfig(
        capacity=_read_int(tail_raw, "capacity", DEFAULT_CAPACITY),
        reverse=_read_bool(tail_raw, "reverse", False),
        drain=_read_bool(tail_raw, "drain", False),
    )
    return RingbufConfig(tail=tail)


def _read_int(section: dict[str, Any], key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"tail.{key} must be an integer, got {value!r}")
    return value


def _read_bool(section: dict[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"tail.{key} must be true or false, got {value!r}")
    return value
