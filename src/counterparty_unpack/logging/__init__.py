"""Synchronous buffered logging with pluggable handlers."""

from .config import (
    LoggerConfig as LoggerConfig,
)
from .config import (
    LogLevel as LogLevel,
)
from .handlers import (
    BaseLogHandler as BaseLogHandler,
)
from .handlers import (
    FileLogHandler as FileLogHandler,
)
from .handlers import (
    MemoryLogHandler as MemoryLogHandler,
)
from .logger import (
    Logger as Logger,
)

__all__ = [
    "BaseLogHandler",
    "FileLogHandler",
    "LogLevel",
    "Logger",
    "LoggerConfig",
    "MemoryLogHandler",
]
