"""Default configuration values for ringbuf."""

from typing import Final

LOGGER_NAME: Final = "ringbuf"

DEFAULT_CAPACITY: Final = 10
DEFAULT_LOG_LEVEL: Final = "INFO"
DEFAULT_LOG_LEVEL_ENV: Final = "LOG_LEVEL"

DEFAULT_CONFIG_DIR: Final = "~/.config/ringbuf"
DEFAULT_CONFIG_DIR_ENV: Final = "RINGBUF_CONFIG_DIR"
DEFAULT_CONFIG_FILE: Final = "config.json"
