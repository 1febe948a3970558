"""Reading and writing delimiter-separated values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .datasink import DataSink
from .datasource import DataSource


def _check_delimiter(delimiter: str) -> None:
    if len(delimiter) != 1:
        raise ValueError("delimiter must be exactly one character")


class DSVReader:
    """Reads rows of delimiter-separated values from a data source."""

    def __init__(self, source: DataSource, delimiter: str) -> None:
        _check_delimiter(delimiter)
        self._source = source
        self._delimiter = delimiter

    def end(self) -> bool:
        """Return True when the underlying source is exhausted."""
        return self._source.end()

    def read_row(self) -> list[str] | None:
        """Read the next row; return None when there is nothing left to read.

        A blank line yields an empty list.
        """
        source = self._source
        row: list[str] = []
        cell: list[str] = []
        inside_quotes = False
        has_data = False

        while not source.end():
            ch = source.get()
            if ch is None:
                return None
            has_data = True
            if ch == '"':
                if source.peek() == '"':
                    source.get()
                    cell.append('"')
                else:
                    inside_quotes = not inside_quotes
            elif ch == self._delimiter and not inside_quotes:
                row.append("".join(cell))
                cell = []
            elif ch in "\r\n" and not inside_quotes:
                if cell or row:
                    row.append("".join(cell))
                if ch == "\r" and source.peek() == "\n":
                    source.get()
                return row
            else:
                cell.append(ch)

        if not has_data:
            return None
        row.append("".join(cell))
        return row

    def __iter__(self) -> Iterator[list[str]]:
        while (row := self.read_row()) is not None:
            yield row


class DSVWriter:
    """Writes rows of delimiter-separated values to a data sink."""

    def __init__(self, sink: DataSink, delimiter: str, quoteall: bool = False) -> None:
        _check_delimiter(delimiter)
        self._sink = sink
        self._delimiter = delimiter
        self._quoteall = quoteall

    def _quote(self, value: str) -> str:
        needs_quotes = (
            self._quoteall
            or self._delimiter in value
            or '"' in value
            or "\n" in value
        )
        if not needs_quotes:
            return value
        return '"' + value.replace('"', '""') + '"'

    def write_row(self, row: Iterable[str]) -> None:
        """Write one row followed by a newline."""
        line = self._delimiter.join(self._quote(value) for value in row)
        self._sink.write(line + "\n")