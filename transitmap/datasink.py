"""Character sinks that writers push their output into."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable


class DataSink(ABC):
    """A destination for characters."""

    @abstractmethod
    def put(self, ch: str) -> None:
        """Append a single character."""

    @abstractmethod
    def write(self, data: Iterable[str]) -> None:
        """Append a string or a sequence of characters."""


class StringDataSink(DataSink):
    """A data sink collecting everything written into a string."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def put(self, ch: str) -> None:
        if len(ch) != 1:
            raise ValueError("put expects exactly one character")
        self._parts.append(ch)

    def write(self, data: Iterable[str]) -> None:
        self._parts.append(data if isinstance(data, str) else "".join(data))

    def string(self) -> str:
        """Return everything written so far."""
        text = "".join(self._parts)
        self._parts = [text]
        return text