"""Exception classes for pressmark.

Every failure in pressmark is fatal for the run: there is no local
recovery and no partial output. Errors raised while reading the source
carry the position of the offending rune so the command line can report
``name:line:offset: message``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pressmark.location import SourceLocation


class PressmarkError(Exception):
    """Base exception for all pressmark errors.

    Subclass this for specific error categories.
    """

    pass


class ScannerError(PressmarkError):
    """Misuse of the rune scanner (pushback without a preceding read)."""

    pass


class SourceError(PressmarkError):
    """Error tied to a position in the markup source.

    Base for lexical and grammar errors.
    """

    def __init__(self, message: str, location: SourceLocation | None = None) -> None:
        """Initialize source error with optional location.

        Args:
            message: Error description
            location: Position of the offending rune (optional)
        """
        self.message = message
        self.location = location

        if location is not None:
            super().__init__(f"{location}: {message}")
        else:
            super().__init__(message)

    @property
    def lineno(self) -> int | None:
        """Line of the offending rune, if known."""
        return self.location.lineno if self.location is not None else None

    @property
    def offset(self) -> int | None:
        """Rune offset of the offending rune, if known."""
        return self.location.offset if self.location is not None else None


class LexError(SourceError):
    """Unrecognized character in the markup source."""

    def __init__(self, rune: str, location: SourceLocation | None = None) -> None:
        self.rune = rune
        super().__init__(f"unrecognized character U+{ord(rune):04X} {rune!r}", location)


class ParseError(SourceError):
    """Markup grammar violation.

    Raised for nested blocks, unmatched or unterminated blocks and
    blocks without a command word.
    """

    pass


class EmitError(PressmarkError):
    """Error while rendering a document to PostScript.

    Raised for markup commands the renderer does not know.
    """

    def __init__(self, command: str, message: str | None = None) -> None:
        """Initialize emit error.

        Args:
            command: The markup command that could not be rendered
            message: Override for the default message
        """
        self.command = command
        super().__init__(message or f"unrecognized command: {command!r}")


class ResourceError(PressmarkError):
    """Font could not be loaded or read.

    Raised at startup, before any parsing happens.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")
