"""State-machine lexer for pressmark markup.

Reads one rune at a time through a Scanner and drives the pure
``transition`` function from ``pressmark.lexer.modes``. At most one rune
of lookahead is used, via the scanner's pushback.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from pressmark.errors import LexError
from pressmark.lexer.modes import Action, LexerState, transition
from pressmark.lexer.scanner import Scanner
from pressmark.tokens import Token, TokenType
from pressmark.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """Convert markup source into a token stream.

    Usage:
            >>> lexer = Lexer("{title Hi}\\n\\nthere")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(OPEN, 1:1)
        Token(WORD, 'title', 1:2)
        Token(WORD, 'Hi', 1:8)
        Token(CLOSE, 1:10)
        Token(PARA_BREAK, 1:11)
        Token(WORD, 'there', 3:13)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_scanner",
        "_source_file",
        "_state",
        "_word",
        "_word_start",
        "_break_start",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markup source text
            source_file: Optional source name for error messages
        """
        self._scanner = Scanner(source, source_file)
        self._source_file = source_file
        self._state = LexerState.START

        # Word accumulation lives here, outside the transition function
        self._word: list[str] = []
        self._word_start: tuple[int, int] = (0, 0)
        # Position of the newline that opened a paragraph break candidate
        self._break_start: tuple[int, int] = (0, 0)

    @property
    def state(self) -> LexerState:
        """Current state of the machine."""
        return self._state

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time

        Raises:
            LexError: On a rune that is neither printable nor whitespace.
                Lexing halts at that rune.
        """
        scanner = self._scanner
        count = 0
        while True:
            rune = scanner.read_rune()
            step = transition(self._state, rune)
            self._state = step.state

            match step.action:
                case Action.CONSUME:
                    if rune == "\n" and step.state is LexerState.PARA_BREAK_CANDIDATE:
                        # The scanner has already moved past the newline's line
                        self._break_start = (scanner.lineno - 1, scanner.offset)
                case Action.EMIT:
                    count += 1
                    yield self._make_token(step.token_type)
                case Action.BEGIN_WORD:
                    self._word = [rune]
                    self._word_start = (scanner.lineno, scanner.offset)
                case Action.APPEND:
                    self._word.append(rune)
                case Action.PUSH_BACK:
                    scanner.unread_rune()
                case Action.FLUSH:
                    if rune is not None:
                        scanner.unread_rune()
                    count += 1
                    yield self._flush_word()
                case Action.REJECT:
                    raise LexError(rune, scanner.location())
                case Action.FINISH:
                    logger.debug("lexed %d tokens from %s", count, self._source_file or "<string>")
                    return

    def _make_token(self, token_type: TokenType) -> Token:
        """Create a valueless token at the rune just read.

        A paragraph break is placed at the newline that started it.
        """
        if token_type is TokenType.PARA_BREAK:
            lineno, offset = self._break_start
        else:
            lineno, offset = self._scanner.lineno, self._scanner.offset
        return Token(
            type=token_type,
            lineno=lineno,
            offset=offset,
            source_file=self._source_file,
        )

    def _flush_word(self) -> Token:
        """Emit the buffered word and clear the buffer."""
        lineno, offset = self._word_start
        text = "".join(self._word)
        self._word = []
        return Token(
            type=TokenType.WORD,
            value=text,
            lineno=lineno,
            offset=offset,
            source_file=self._source_file,
        )
