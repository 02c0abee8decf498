"""Token and TokenType definitions for the pressmark lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token has a type, an optional value and the position of its first
rune.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from pressmark.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer."""

    PARA_BREAK = auto()  # two consecutive newlines
    OPEN = auto()  # {
    CLOSE = auto()  # }
    WORD = auto()  # run of printable, non-space, non-brace runes


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type
        value: Word text; empty for every other type
        lineno: Line of the first rune (1-indexed)
        offset: Rune offset of the first rune (1-indexed)
        source_file: Source name for diagnostics

    """

    type: TokenType
    value: str = ""
    lineno: int = 0
    offset: int = 0
    source_file: str | None = None

    @property
    def location(self) -> SourceLocation:
        """Source location of the token's first rune."""
        return SourceLocation(self.lineno, self.offset, self.source_file)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.type is TokenType.WORD:
            val = self.value
            if len(val) > 20:
                val = val[:17] + "..."
            return f"Token({self.type.name}, {val!r}, {self.lineno}:{self.offset})"
        return f"Token({self.type.name}, {self.lineno}:{self.offset})"
