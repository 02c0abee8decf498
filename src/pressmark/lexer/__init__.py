"""Character-class state-machine lexer for pressmark markup.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerState, Scanner
├── core.py              # Lexer driver (buffers, token construction)
├── modes.py             # LexerState enum and pure transition function
└── scanner.py           # Rune cursor with pushback and position counters

Usage:
    >>> from pressmark.lexer import Lexer
    >>> [t.value for t in Lexer("hello world").tokenize()]
    ['hello', 'world']

"""

from pressmark.lexer.core import Lexer
from pressmark.lexer.modes import LexerState, transition
from pressmark.lexer.scanner import Scanner

__all__ = ["Lexer", "LexerState", "Scanner", "transition"]
