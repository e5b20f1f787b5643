from counterparty_unpack.logging.handlers.base import BaseLogHandler


class MemoryLogHandler(BaseLogHandler):
    """Keeps every pushed line in memory, for tests and embedding UIs."""

    def __init__(self, max_lines: int | None = None) -> None:
        """Initialize the MemoryLogHandler.

        Args:
            max_lines (int, optional): Keep only the newest max_lines lines.
                Unbounded if None.

        Raises:
            ValueError: If max_lines is given and not positive.

        """
        super().__init__()
        if max_lines is not None and max_lines <= 0:
            raise ValueError(f"Invalid max_lines; expected >0 but got {max_lines}")
        self._max_lines = max_lines
        self._lines: list[str] = []
        self.push_count = 0

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def push(self, buffer: list[str]) -> None:
        self._lines.extend(buffer)
        if self._max_lines is not None and len(self._lines) > self._max_lines:
            del self._lines[: len(self._lines) - self._max_lines]
        self.push_count += 1

    def clear(self) -> None:
        self._lines.clear()
