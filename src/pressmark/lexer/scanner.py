"""Rune cursor with one-rune pushback and position tracking.

The scanner is the only component that touches the raw source string.
Its counters exist to produce ``line:offset`` positions for diagnostics.
"""

from __future__ import annotations

from pressmark.errors import ScannerError
from pressmark.location import SourceLocation


class Scanner:
    """Read runes one at a time from a source string.

    ``lineno`` starts at 1 and is bumped after a newline is read.
    ``offset`` is the number of runes read so far, so right after a read it
    is the 1-indexed offset of that rune.

    Usage:
            >>> sc = Scanner("ab")
            >>> sc.read_rune(), sc.offset
            ('a', 1)
            >>> sc.unread_rune()
            >>> sc.offset
            0

    Thread Safety:
        Scanner instances are single-use. Create one per source string.

    """

    __slots__ = ("_source", "_source_len", "_pos", "_last", "_source_file", "lineno", "offset")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        # Most recently read rune; None once pushed back or at end of input
        self._last: str | None = None
        self._source_file = source_file
        self.lineno = 1
        self.offset = 0

    def read_rune(self) -> str | None:
        """Return the next rune, or None at end of input."""
        if self._pos >= self._source_len:
            self._last = None
            return None

        rune = self._source[self._pos]
        self._pos += 1
        self._last = rune
        self.offset += 1
        if rune == "\n":
            self.lineno += 1
        return rune

    def unread_rune(self) -> None:
        """Push back the rune returned by the immediately preceding read.

        Raises:
            ScannerError: If the previous call was not a successful read.
        """
        if self._last is None:
            raise ScannerError("unread_rune called without a preceding read_rune")

        self._pos -= 1
        self.offset -= 1
        if self._last == "\n":
            self.lineno -= 1
        self._last = None

    def location(self) -> SourceLocation:
        """Current position as a SourceLocation."""
        return SourceLocation(self.lineno, self.offset, self._source_file)
