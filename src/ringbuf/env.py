"""Logging setup for ringbuf entry points.

The library itself only emits records on the ``ringbuf`` logger; handlers
are installed by the CLI through setup_logging().
"""

import logging
import os

from ringbuf.constants import DEFAULT_LOG_LEVEL, DEFAULT_LOG_LEVEL_ENV, LOGGER_NAME

LOGGER = logging.getLogger(LOGGER_NAME)


def setup_logging(level: str | None = None) -> None:
    """Route log records to stderr through rich.

    *level* defaults to the ``LOG_LEVEL`` environment variable, then INFO.
    """
    from rich.console import Console
    from rich.logging import RichHandler

    log_level = (
        level or os.environ.get(DEFAULT_LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    ).upper()
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                show_time=False,
                show_path=False,
                rich_tracebacks=False,
            )
        ],
    )
