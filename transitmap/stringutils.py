"""Small string helpers: slicing, case, padding, splitting and edit distance."""

from __future__ import annotations

from collections.abc import Iterable

_STRIP_CHARS = " \t\r\n"


def slice_string(text: str, start: int, end: int = 0) -> str:
    """Return ``text[start:end]``, where an ``end`` of 0 means the end of the string.

    Negative positions count from the end and are clamped at 0.
    """
    length = len(text)
    if end == 0:
        end = length
    if start < 0:
        start = max(0, length + start)
    if end < 0:
        end = max(0, length + end)
    if start > end:
        return ""
    return text[start:end]


def capitalize(text: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    return text[:1].upper() + text[1:].lower()


def upper(text: str) -> str:
    """Return the string in upper case."""
    return text.upper()


def lower(text: str) -> str:
    """Return the string in lower case."""
    return text.lower()


def lstrip(text: str) -> str:
    """Remove leading spaces, tabs, carriage returns and newlines."""
    return text.lstrip(_STRIP_CHARS)


def rstrip(text: str) -> str:
    """Remove trailing spaces, tabs, carriage returns and newlines."""
    return text.rstrip(_STRIP_CHARS)


def strip(text: str) -> str:
    """Remove leading and trailing spaces, tabs, carriage returns and newlines."""
    return lstrip(rstrip(text))


def _check_fill(fill: str) -> None:
    if len(fill) != 1:
        raise ValueError("fill must be exactly one character")


def center(text: str, width: int, fill: str = " ") -> str:
    """Centre ``text`` in ``width`` columns; any odd padding goes on the right."""
    _check_fill(fill)
    if len(text) >= width:
        return text
    total = width - len(text)
    left = total // 2
    return fill * left + text + fill * (total - left)


def ljust(text: str, width: int, fill: str = " ") -> str:
    """Pad ``text`` on the right to ``width`` columns."""
    _check_fill(fill)
    if len(text) >= width:
        return text
    return text + fill * (width - len(text))


def rjust(text: str, width: int, fill: str = " ") -> str:
    """Pad ``text`` on the left to ``width`` columns."""
    _check_fill(fill)
    if len(text) >= width:
        return text
    return fill * (width - len(text)) + text


def replace(text: str, old: str, rep: str) -> str:
    """Replace every occurrence of ``old``; an empty ``old`` leaves the text unchanged."""
    if not old:
        return text
    return text.replace(old, rep)


def split(text: str, sep: str = "") -> list[str]:
    """Split on ``sep``, or on runs of whitespace when ``sep`` is empty."""
    if not sep:
        return text.split()
    return text.split(sep)


def join(sep: str, items: Iterable[str]) -> str:
    """Join ``items`` with ``sep`` between them."""
    return sep.join(items)


def expand_tabs(text: str, tabsize: int = 4) -> str:
    """Replace tabs with spaces up to the next multiple of ``tabsize``.

    The column is counted from the start of the string. A ``tabsize`` of zero
    or less removes tabs altogether.
    """
    if tabsize <= 0:
        return text.replace("\t", "")
    pieces: list[str] = []
    column = 0
    for ch in text:
        if ch == "\t":
            spaces = tabsize - column % tabsize
            pieces.append(" " * spaces)
            column += spaces
        else:
            pieces.append(ch)
            column += 1
    return "".join(pieces)


def edit_distance(left: str, right: str, ignorecase: bool = False) -> int:
    """Return the Levenshtein distance between two strings."""
    if ignorecase:
        left = left.lower()
        right = right.lower()
    previous = list(range(len(right) + 1))
    for i, lch in enumerate(left, start=1):
        current = [i]
        for j, rch in enumerate(right, start=1):
            cost = 0 if lch == rch else 1
            current.append(
                min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost)
            )
        previous = current
    return previous[-1]