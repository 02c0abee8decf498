"""Single-pass parser producing a flat document.

Consumes the token stream from Lexer and builds a Document of Word,
ParaBreak and Markup nodes.

Markup blocks never nest. The parser holds exactly one optional slot for
the block being built, never a stack, so a second ``{`` while a block is
open is rejected at the point it is seen.

Thread Safety:
Parser instances are single-use and not thread-safe. The resulting
Document is immutable and safe to share.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from pressmark.errors import ParseError
from pressmark.lexer import Lexer
from pressmark.location import SourceLocation
from pressmark.nodes import Document, Inline, Markup, ParaBreak, Word
from pressmark.tokens import Token, TokenType
from pressmark.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class _OpenBlock:
    """Markup block between its ``{`` and ``}``."""

    location: SourceLocation
    cmd: str | None = None
    args: list[str] = field(default_factory=list)


class Parser:
    """Parser for pressmark markup.

    Usage:
            >>> doc = Parser("{title Hello} world").parse()
            >>> doc.children[0]
        Markup(location=..., cmd='title', args=('Hello',))

    Grammar errors raise ParseError carrying the position of the offending
    token. Lexical errors from the Lexer propagate unchanged.

    """

    __slots__ = ("_source", "_source_file", "_children", "_open")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: Markup source text
            source_file: Optional source name for error messages
        """
        self._source = source
        self._source_file = source_file
        self._children: list[Inline] = []
        self._open: _OpenBlock | None = None

    def parse(self) -> Document:
        """Parse source into a Document.

        Returns:
            Document whose children are in source order

        Raises:
            LexError: On an unrecognized character
            ParseError: On nested, unmatched or unterminated blocks
        """
        self._children = []
        self._open = None

        lexer = Lexer(self._source, self._source_file)
        for token in lexer.tokenize():
            self._feed(token)

        if self._open is not None:
            raise ParseError("unterminated markup block", self._open.location)

        logger.debug("parsed %d nodes", len(self._children))
        loc = SourceLocation(lineno=1, offset=1, source_file=self._source_file)
        return Document(location=loc, children=tuple(self._children))

    def _feed(self, token: Token) -> None:
        """Apply one token to the document under construction."""
        match token.type:
            case TokenType.PARA_BREAK:
                # Blank lines inside a block are insignificant
                if self._open is None:
                    self._children.append(ParaBreak(location=token.location))
            case TokenType.OPEN:
                if self._open is not None:
                    raise ParseError("nested markup is not supported", token.location)
                self._open = _OpenBlock(location=token.location)
            case TokenType.CLOSE:
                self._close(token)
            case TokenType.WORD:
                self._word(token)

    def _close(self, token: Token) -> None:
        block = self._open
        if block is None:
            raise ParseError("unmatched '}'", token.location)
        # An empty block keeps an empty command; rendering rejects it
        self._children.append(
            Markup(location=block.location, cmd=block.cmd or "", args=tuple(block.args))
        )
        self._open = None

    def _word(self, token: Token) -> None:
        block = self._open
        if block is None:
            self._children.append(Word(location=token.location, text=token.value))
        elif block.cmd is None:
            block.cmd = token.value
        else:
            block.args.append(token.value)
