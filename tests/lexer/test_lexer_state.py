"""Tests for the pure transition function and lexer state after tokenizing."""

from __future__ import annotations

import pytest

from pressmark.lexer import Lexer, LexerState, transition
from pressmark.lexer.modes import Action, Step
from pressmark.tokens import TokenType


class TestStartState:
    """Transitions out of START."""

    @pytest.mark.parametrize(
        ("rune", "token_type"),
        [("{", TokenType.OPEN), ("}", TokenType.CLOSE)],
    )
    def test_braces_emit(self, rune: str, token_type: TokenType) -> None:
        assert transition(LexerState.START, rune) == Step(LexerState.START, Action.EMIT, token_type)

    def test_newline_becomes_candidate(self) -> None:
        """A newline emits nothing yet."""
        step = transition(LexerState.START, "\n")
        assert step.state is LexerState.PARA_BREAK_CANDIDATE
        assert step.action is Action.CONSUME

    @pytest.mark.parametrize("rune", [" ", "\t", "\r", "\u00a0"])
    def test_whitespace_consumed(self, rune: str) -> None:
        assert transition(LexerState.START, rune) == Step(LexerState.START, Action.CONSUME)

    def test_printable_begins_word(self) -> None:
        assert transition(LexerState.START, "w") == Step(LexerState.WORD, Action.BEGIN_WORD)

    @pytest.mark.parametrize("rune", ["\x00", "\x07", "\x1b", "\u200b"])
    def test_control_rejected(self, rune: str) -> None:
        """Runes that are neither printable nor whitespace are errors."""
        assert transition(LexerState.START, rune).action is Action.REJECT

    def test_end_of_input_finishes(self) -> None:
        assert transition(LexerState.START, None).action is Action.FINISH


class TestParaBreakCandidate:
    """Transitions after a single newline."""

    def test_second_newline_emits_break(self) -> None:
        assert transition(LexerState.PARA_BREAK_CANDIDATE, "\n") == Step(
            LexerState.START, Action.EMIT, TokenType.PARA_BREAK
        )

    def test_other_rune_pushed_back(self) -> None:
        """A single newline is ordinary whitespace."""
        assert transition(LexerState.PARA_BREAK_CANDIDATE, "x") == Step(
            LexerState.START, Action.PUSH_BACK
        )

    def test_end_of_input_finishes(self) -> None:
        assert transition(LexerState.PARA_BREAK_CANDIDATE, None).action is Action.FINISH


class TestWordState:
    """Transitions while accumulating a word."""

    def test_word_rune_appends(self) -> None:
        assert transition(LexerState.WORD, "x") == Step(LexerState.WORD, Action.APPEND)

    @pytest.mark.parametrize("rune", [" ", "\n", "{", "}", "\x00", None])
    def test_terminators_flush(self, rune: str | None) -> None:
        """Whitespace, braces, control runes and end of input end the word."""
        assert transition(LexerState.WORD, rune) == Step(
            LexerState.START, Action.FLUSH, TokenType.WORD
        )


class TestLexerStateAfterTokenize:
    """The driver returns to START and clears its buffer."""

    @pytest.mark.parametrize("source", ["", "word", "a\n", "{title x}", "a\n\n"])
    def test_ends_in_start(self, source: str) -> None:
        lexer = Lexer(source)
        list(lexer.tokenize())
        assert lexer.state is LexerState.START

    def test_word_buffer_cleared(self) -> None:
        lexer = Lexer("trailing")
        list(lexer.tokenize())
        assert lexer._word == []
