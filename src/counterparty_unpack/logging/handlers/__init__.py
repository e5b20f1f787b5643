from .base import BaseLogHandler as BaseLogHandler
from .file import FileLogHandler as FileLogHandler
from .memory import MemoryLogHandler as MemoryLogHandler

__all__ = [
    "BaseLogHandler",
    "FileLogHandler",
    "MemoryLogHandler",
]
