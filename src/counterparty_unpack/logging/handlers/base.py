from abc import ABC, abstractmethod

from counterparty_unpack.logging.config import LoggerConfig


class BaseLogHandler(ABC):
    """Abstract base class for log handlers, defining where flushed lines go."""

    def __init__(self):
        self._primary_config: LoggerConfig | None = None

    @property
    def primary_config(self) -> LoggerConfig | None:
        """Get the config of the logger this handler is attached to."""
        return self._primary_config

    def add_primary_config(self, config: LoggerConfig) -> None:
        """Add the owning logger's configuration to the handler."""
        self._primary_config = config

    def close(self) -> None:
        """Release any resources held by the handler."""

    @abstractmethod
    def push(self, buffer: list[str]) -> None:
        """Deliver a batch of formatted log lines.

        Args:
            buffer (list[str]): The lines to push, oldest first.

        """
