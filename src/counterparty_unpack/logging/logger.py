"""Synchronous buffered logger."""

import sys
import threading
import time

from counterparty_unpack.logging.config import LoggerConfig, LogLevel
from counterparty_unpack.logging.handlers import BaseLogHandler


def _time_iso8601() -> str:
    now = time.time()
    return time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(now)) + f".{int(now * 1000) % 1000:03d}Z"


class Logger:
    """A thread-safe logger that buffers lines and pushes them to handlers.

    The buffer is flushed when it reaches the configured size, when its
    oldest line is older than the flush interval, or immediately on an
    ERROR line. Nothing is written anywhere until a flush happens.
    """

    def __init__(
        self,
        name: str = "",
        config: LoggerConfig | None = None,
        handlers: list[BaseLogHandler] | None = None,
    ):
        """Initializes a Logger with specified configuration and handlers.

        Args:
            name (str): Name of the logger. Defaults to an empty string.
            config (LoggerConfig, optional): Level, stdout, format and flush
                settings. Defaults to LoggerConfig.default().
            handlers (list[BaseLogHandler], optional): Destinations for flushed
                lines. Defaults to none.

        Raises:
            TypeError: If one of the provided handlers does not inherit from BaseLogHandler.

        """
        self._name = name
        self._config = config if config is not None else LoggerConfig.default()
        self._handlers = list(handlers) if handlers is not None else []

        for handler in self._handlers:
            if not isinstance(handler, BaseLogHandler):
                raise TypeError(
                    f"Invalid handler type; expected BaseLogHandler but got {type(handler).__name__}"
                )
            handler.add_primary_config(self._config)

        self._lock = threading.Lock()
        self._buffer: list[str] = []
        self._buffer_start_time_s = time.monotonic()
        self._is_running = True

    def _flush_locked(self) -> None:
        if not self._buffer:
            return

        batch = self._buffer
        self._buffer = []
        self._buffer_start_time_s = time.monotonic()

        if self._config.do_stout:
            sys.stdout.write("\n".join(batch) + "\n")

        for handler in self._handlers:
            handler.push(batch)

    def _process_log(self, level: LogLevel, msg: str) -> None:
        if not self._is_running or level < self._config.base_level:
            return

        line = self._config.str_format % {
            "asctime": _time_iso8601(),
            "name": self._name,
            "levelname": level.name,
            "message": msg,
        }

        with self._lock:
            if not self._buffer:
                self._buffer_start_time_s = time.monotonic()
            self._buffer.append(line)

            is_full = len(self._buffer) >= self._config.buffer_size
            is_stale = (
                time.monotonic() - self._buffer_start_time_s
            ) >= self._config.flush_interval_s
            if is_full or is_stale or level >= LogLevel.ERROR:
                self._flush_locked()

    def set_log_level(self, level: LogLevel) -> None:
        """Modify the logger's base log level at runtime.

        Args:
            level (LogLevel): The new base log level.

        """
        self.debug(f"Changing base log level from {self._config.base_level.name} to {level.name}")
        self._config.base_level = level
        for handler in self._handlers:
            handler.add_primary_config(self._config)

    def trace(self, msg: str) -> None:
        self._process_log(LogLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        self._process_log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        self._process_log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        self._process_log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        self._process_log(LogLevel.ERROR, msg)

    def flush(self) -> None:
        """Push any buffered lines to stdout and the handlers now."""
        with self._lock:
            self._flush_locked()

    def shutdown(self) -> None:
        """Flush remaining lines, close handlers and stop accepting new lines."""
        with self._lock:
            if not self._is_running:
                return
            self._is_running = False
            self._flush_locked()
        for handler in self._handlers:
            handler.close()

    def is_running(self) -> bool:
        return self._is_running

    def get_name(self) -> str:
        return self._name

    def get_config(self) -> LoggerConfig:
        return self._config
