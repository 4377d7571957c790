""" Line cursor shared by the builder and the section parsers.

The cursor yields trimmed, non-blank lines and supports one line of lookahead, which the
tour section needs to decide whether another tour follows. Token conversion helpers
live here too so every numeric failure becomes an InvalidNumberError. """

from __future__ import annotations
from typing import Iterable, Iterator, Optional

from .errors import InvalidNumberError


class LineCursor:
    def __init__(self, lines: Iterable[str]):
        self._it: Iterator[str] = iter(lines)
        self._peeked: Optional[str] = None
        self.lineno = 0                     # physical line number of the last line read

    def _advance(self) -> Optional[str]:
        for raw in self._it:
            self.lineno += 1
            line = raw.strip()
            if line:
                return line
        return None

    def peek(self) -> Optional[str]:
        """Next non-blank line without consuming it, or None at end of input."""
        if self._peeked is None:
            self._peeked = self._advance()
        return self._peeked

    def next_line(self) -> Optional[str]:
        if self._peeked is not None:
            line, self._peeked = self._peeked, None
            return line
        return self._advance()

    def __iter__(self):
        return self

    def __next__(self) -> str:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line


def parse_int(token: str, entry: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise InvalidNumberError(token, entry) from None


def parse_float(token: str, entry: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise InvalidNumberError(token, entry) from None


def parse_count(token: str, entry: str) -> int:
    """Non-negative integer: node ids, dimension and capacity."""
    value = parse_int(token, entry)
    if value < 0:
        raise InvalidNumberError(token, entry)
    return value
