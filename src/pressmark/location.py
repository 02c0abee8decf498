"""Source location tracking for error messages.

Provides SourceLocation dataclass for positions in markup source.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a rune in the markup source.

    Both coordinates are 1-indexed. ``offset`` counts runes from the start
    of the source, not columns within the line.

    Attributes:
        lineno: Line number (1-indexed)
        offset: Rune offset from the start of the source (1-indexed)
        source_file: Source name for diagnostics (path or ``-`` for stdin)

    Examples:
            >>> loc = SourceLocation(lineno=2, offset=14, source_file="notes.txt")
            >>> str(loc)
            'notes.txt:2:14'

    """

    lineno: int
    offset: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.txt:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.offset}"
        return f"{self.lineno}:{self.offset}"
