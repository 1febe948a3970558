"""Character sources that readers pull their input from."""

from __future__ import annotations

from abc import ABC, abstractmethod


class DataSource(ABC):
    """A stream of characters that can be read one at a time or in chunks."""

    @abstractmethod
    def end(self) -> bool:
        """Return True when no characters remain."""

    @abstractmethod
    def get(self) -> str | None:
        """Consume and return the next character, or None at the end."""

    @abstractmethod
    def peek(self) -> str | None:
        """Return the next character without consuming it, or None at the end."""

    @abstractmethod
    def read(self, count: int) -> str:
        """Consume and return up to ``count`` characters; empty at the end."""


class StringDataSource(DataSource):
    """A data source reading from an in-memory string."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._index = 0

    def end(self) -> bool:
        return self._index >= len(self._text)

    def get(self) -> str | None:
        if self.end():
            return None
        ch = self._text[self._index]
        self._index += 1
        return ch

    def peek(self) -> str | None:
        if self.end():
            return None
        return self._text[self._index]

    def read(self, count: int) -> str:
        count = max(count, 0)
        chunk = self._text[self._index:self._index + count]
        self._index += len(chunk)
        return chunk