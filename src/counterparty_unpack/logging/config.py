"""Configuration classes and enums for the decoder's logger."""

from enum import IntEnum
from typing import Self

from msgspec import Struct


class LogLevel(IntEnum):
    """Log level enumeration."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4


class LoggerConfig(Struct):
    """Configuration for the buffered logger.

    Attributes:
        base_level (LogLevel): The minimum level that will be logged.
        do_stout (bool): If True, flushed lines are also printed to stdout.
        str_format (str): %-style format for each line. Supports %(asctime)s,
            %(levelname)s, %(name)s and %(message)s; the last is required.
        flush_interval_s (float): Maximum age (in seconds) of the oldest
            buffered line before a flush is forced. Must be > 0.
        buffer_size (int): Number of buffered lines that triggers a flush.

    """

    base_level: LogLevel = LogLevel.INFO
    do_stout: bool = False
    str_format: str = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
    flush_interval_s: float = 1.0
    buffer_size: int = 1000

    def __post_init__(self) -> None:
        """Validate the format string, flush interval and buffer size."""
        if "%(message)s" not in self.str_format:
            raise ValueError("Format string must contain '%(message)s' placeholder")
        if self.flush_interval_s <= 0.0:
            raise ValueError(
                f"Invalid flush interval; expected >0 but got {self.flush_interval_s}"
            )
        if self.buffer_size <= 0:
            raise ValueError(
                f"Invalid buffer size; expected >0 but got {self.buffer_size}"
            )

    @classmethod
    def default(cls) -> Self:
        """Return an INFO-level config that does not print to stdout."""
        return cls()
