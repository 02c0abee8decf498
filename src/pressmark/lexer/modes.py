"""Lexer states and the pure transition function.

The lexer is a three-state machine. ``transition`` maps the current state
and the rune just read to the next state plus an action for the driver to
perform. It holds no buffers and has no side effects: the word buffer and
the scanner live on the Lexer.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple

from pressmark.tokens import TokenType

BRACES = frozenset("{}")


class LexerState(Enum):
    """Lexer states.

    - START: Between tokens
    - PARA_BREAK_CANDIDATE: One newline seen, waiting for a second
    - WORD: Accumulating a word

    """

    START = auto()
    PARA_BREAK_CANDIDATE = auto()
    WORD = auto()


class Action(Enum):
    """What the driver does with the rune it just read."""

    CONSUME = auto()  # drop the rune
    EMIT = auto()  # emit a valueless token
    BEGIN_WORD = auto()  # reset the buffer and seed it with the rune
    APPEND = auto()  # add the rune to the buffer
    PUSH_BACK = auto()  # unread the rune
    FLUSH = auto()  # unread the rune (if any) and emit the buffered word
    REJECT = auto()  # lexical error on the rune
    FINISH = auto()  # end of input


class Step(NamedTuple):
    """Result of one transition."""

    state: LexerState
    action: Action
    token_type: TokenType | None = None


def is_word_rune(rune: str) -> bool:
    """Whether ``rune`` may appear inside a word."""
    return rune.isprintable() and not rune.isspace() and rune not in BRACES


def transition(state: LexerState, rune: str | None) -> Step:
    """Compute the next step for ``rune`` read in ``state``.

    Args:
        state: Current lexer state
        rune: The rune just read, or None at end of input

    Returns:
        The next state and the action to perform
    """
    if state is LexerState.WORD:
        if rune is not None and is_word_rune(rune):
            return Step(LexerState.WORD, Action.APPEND)
        return Step(LexerState.START, Action.FLUSH, TokenType.WORD)

    if state is LexerState.PARA_BREAK_CANDIDATE:
        if rune is None:
            return Step(LexerState.START, Action.FINISH)
        if rune == "\n":
            return Step(LexerState.START, Action.EMIT, TokenType.PARA_BREAK)
        # A single newline is ordinary whitespace
        return Step(LexerState.START, Action.PUSH_BACK)

    if rune is None:
        return Step(LexerState.START, Action.FINISH)
    if rune == "{":
        return Step(LexerState.START, Action.EMIT, TokenType.OPEN)
    if rune == "}":
        return Step(LexerState.START, Action.EMIT, TokenType.CLOSE)
    if rune == "\n":
        return Step(LexerState.PARA_BREAK_CANDIDATE, Action.CONSUME)
    if rune.isspace():
        return Step(LexerState.START, Action.CONSUME)
    if rune.isprintable():
        return Step(LexerState.WORD, Action.BEGIN_WORD)
    return Step(LexerState.START, Action.REJECT)
