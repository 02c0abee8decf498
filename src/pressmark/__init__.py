"""
pressmark — minimal markup to paginated PostScript

Turns plain text with blank-line paragraphs and ``{title ...}`` blocks into
a self-contained PostScript program for letter-sized pages, optionally
kerned with metrics read from a TrueType/OpenType font.

Quick Start:
    >>> from pressmark import parse, render
    >>> doc = parse("{title Hello} Some words.")
    >>> program = render(doc)
    >>> program.startswith("%!PS")
    True

    >>> # Or use the high-level Typesetter
    >>> from pressmark import Typesetter, load_font
    >>> ts = Typesetter(font=load_font("Go-Regular.ttf", 12))
    >>> program = ts("First paragraph.\\n\\nSecond one.")

Installation:
    pip install pressmark
"""

from pressmark.config import (
    LayoutConfig,
    get_layout_config,
    layout_config_context,
    load_config_file,
    reset_layout_config,
    set_layout_config,
)
from pressmark.errors import (
    EmitError,
    LexError,
    ParseError,
    PressmarkError,
    ResourceError,
    ScannerError,
    SourceError,
)
from pressmark.layout import FontSource, FreetypeFont, LayoutModel, fixed_26_6_to_float, load_font
from pressmark.lexer import Lexer, Scanner
from pressmark.location import SourceLocation
from pressmark.nodes import Document, Inline, Markup, Node, ParaBreak, Word
from pressmark.parser import Parser
from pressmark.renderers import DocumentRenderer, PostScriptRenderer
from pressmark.tokens import Token, TokenType

__version__ = "0.3.0"


def parse(source: str, *, source_file: str | None = None) -> Document:
    """Parse markup source into a Document.

    Args:
        source: Markup source text
        source_file: Optional source name for error messages

    Returns:
        Document root node

    Raises:
        LexError: On an unrecognized character
        ParseError: On a markup grammar violation
    """
    return Parser(source, source_file=source_file).parse()


def render(
    doc: Document,
    *,
    model: LayoutModel | None = None,
    font: FontSource | None = None,
) -> str:
    """Render a Document to a PostScript program.

    Args:
        doc: Parsed document
        model: Layout to use; built from the active config and ``font``
            when omitted
        font: Font for the name and kerning when ``model`` is omitted

    Returns:
        PostScript program text

    Raises:
        EmitError: On an unrecognized markup command
    """
    if model is None:
        model = LayoutModel.from_config(font=font)
    return PostScriptRenderer(model).render(doc)


class Typesetter:
    """High-level processor combining parser, layout and renderer.

    Usage:
        >>> ts = Typesetter(LayoutConfig(profile="loose"))
        >>> program = ts("{title Notes}\\n\\nSome text.")

        >>> # Access the document
        >>> doc = ts.parse("{title Notes}")
        >>> doc.children[0].cmd
        'title'

    Thread Safety:
        Uses ContextVar for configuration. Each call builds its own
        LayoutModel, so instances can be shared.

    """

    __slots__ = ("_config", "_font")

    def __init__(self, config: LayoutConfig | None = None, *, font: FontSource | None = None) -> None:
        """Initialize processor.

        Args:
            config: Layout settings (defaults to LayoutConfig())
            font: Loaded font for the PostScript name and kerning
        """
        self._config = config or LayoutConfig()
        self._font = font

    @property
    def config(self) -> LayoutConfig:
        return self._config

    def __call__(self, source: str, *, source_file: str | None = None) -> str:
        """Parse and render source to a PostScript program."""
        return self.render(self.parse(source, source_file=source_file))

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse source to a Document."""
        return parse(source, source_file=source_file)

    def render(self, doc: Document) -> str:
        """Render a Document with this processor's layout."""
        with layout_config_context(self._config):
            model = LayoutModel.from_config(self._config, self._font)
            return PostScriptRenderer(model).render(doc)


__all__ = [
    "Document",
    "DocumentRenderer",
    "EmitError",
    "FontSource",
    "FreetypeFont",
    "Inline",
    "LayoutConfig",
    "LayoutModel",
    "LexError",
    "Lexer",
    "Markup",
    "Node",
    "ParaBreak",
    "ParseError",
    "Parser",
    "PostScriptRenderer",
    "PressmarkError",
    "ResourceError",
    "Scanner",
    "ScannerError",
    "SourceError",
    "SourceLocation",
    "Token",
    "TokenType",
    "Typesetter",
    "Word",
    "fixed_26_6_to_float",
    "get_layout_config",
    "layout_config_context",
    "load_config_file",
    "load_font",
    "parse",
    "render",
    "reset_layout_config",
    "set_layout_config",
    "__version__",
]
