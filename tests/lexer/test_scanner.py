"""Tests for the rune scanner: pushback and position counters."""

import pytest

from pressmark.errors import ScannerError
from pressmark.lexer import Scanner


class TestReadRune:
    """Reading runes advances the counters."""

    def test_reads_in_order(self) -> None:
        """Runes come back in source order, then None."""
        sc = Scanner("ab")
        assert sc.read_rune() == "a"
        assert sc.read_rune() == "b"
        assert sc.read_rune() is None
        assert sc.read_rune() is None

    def test_offset_counts_runes(self) -> None:
        """After a read, offset is the 1-indexed position of that rune."""
        sc = Scanner("héllo")
        sc.read_rune()
        sc.read_rune()
        assert sc.offset == 2

    def test_newline_bumps_line(self) -> None:
        """Reading a newline moves to the next line."""
        sc = Scanner("a\nb")
        sc.read_rune()
        assert sc.lineno == 1
        sc.read_rune()
        assert sc.lineno == 2

    def test_end_of_input_does_not_advance(self) -> None:
        """Reading past the end leaves the counters alone."""
        sc = Scanner("a")
        sc.read_rune()
        sc.read_rune()
        assert sc.offset == 1


class TestUnreadRune:
    """One rune of pushback."""

    def test_unread_then_reread(self) -> None:
        """A pushed-back rune is returned again."""
        sc = Scanner("xy")
        sc.read_rune()
        sc.read_rune()
        sc.unread_rune()
        assert sc.offset == 1
        assert sc.read_rune() == "y"

    def test_unread_newline_restores_line(self) -> None:
        """Pushing back a newline decrements the line counter."""
        sc = Scanner("a\nb")
        sc.read_rune()
        sc.read_rune()
        sc.unread_rune()
        assert sc.lineno == 1
        assert sc.read_rune() == "\n"
        assert sc.lineno == 2

    def test_unread_without_read_is_error(self) -> None:
        """Pushback at the start is a usage error."""
        with pytest.raises(ScannerError):
            Scanner("a").unread_rune()

    def test_double_unread_is_error(self) -> None:
        """Only the most recent read can be pushed back."""
        sc = Scanner("ab")
        sc.read_rune()
        sc.read_rune()
        sc.unread_rune()
        with pytest.raises(ScannerError):
            sc.unread_rune()

    def test_unread_after_end_of_input_is_error(self) -> None:
        """A read that hit end of input leaves nothing to push back."""
        sc = Scanner("a")
        sc.read_rune()
        assert sc.read_rune() is None
        with pytest.raises(ScannerError):
            sc.unread_rune()


class TestLocation:
    def test_location_carries_source_file(self) -> None:
        sc = Scanner("abc", source_file="notes.txt")
        sc.read_rune()
        assert str(sc.location()) == "notes.txt:1:1"
