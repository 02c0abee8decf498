"""PostScript renderer.

Renders a LayoutModel as a preamble of constants and procedures, then a
Document as one statement per node. The procedures do the page work at
print time:

- ``next_line`` moves to the left margin, a given distance down
- ``page_check`` starts a new page once below the bottom margin
- ``wshow`` shows a word, wrapping at the right margin first
- ``set_size`` selects the document font at a given size

When the model has kerning data, ``wshow`` shows words with ``kshow``
and looks each adjacent pair up in a ``kerning`` dictionary.

Thread Safety:
Each render() call builds its own StringBuilder. The model's kerning
cache is filled during the first preamble; render from one thread.
"""

from __future__ import annotations

from pressmark.config import get_layout_config
from pressmark.errors import EmitError
from pressmark.layout import LayoutModel
from pressmark.nodes import Document, Inline, Markup, ParaBreak, Word
from pressmark.stringbuilder import StringBuilder
from pressmark.utils.logger import get_logger
from pressmark.utils.text import escape_ps_string, format_number

logger = get_logger(__name__)

HEADER = """\
%!PS-Adobe-3.0
%%Creator: pressmark
%%EndComments
"""

PROCEDURES = """\
% newline or padding
/next_line { left_margin exch currentpoint exch pop exch sub moveto } bind def

% new page once the cursor is below the bottom margin
/page_check {
  currentpoint exch pop bottom_margin lt {
    showpage left_margin top_margin current_size sub moveto
  } if
} bind def

/set_size { /current_size exch def font_name current_size selectfont } bind def
"""

SHOW_PLAIN = """\
% show a word, wrapping first if it would cross the right margin
/wshow {
  dup stringwidth pop currentpoint pop add right_margin gt {
    line_space next_line page_check
  } if
  show
} bind def
"""

SHOW_KERNED = """\
% kerning adjustment for two character codes, scaled to the current size
/kern_key 2 string def
/kern_adjust {
  kern_key 1 3 -1 roll put
  kern_key 0 3 -1 roll put
  kerning kern_key known {
    kerning kern_key get current_size body_size div mul
  } { 0 } ifelse
} bind def

% show a word, wrapping first if it would cross the right margin
/wshow {
  dup stringwidth pop currentpoint pop add right_margin gt {
    line_space next_line page_check
  } if
  { kern_adjust 0 rmoveto } exch kshow
} bind def
"""


def ps_string(text: str) -> str:
    """Quote text as a PostScript string literal."""
    return f"({escape_ps_string(text)})"


class PostScriptRenderer:
    """Render a Document to a PostScript program.

    Usage:
        >>> from pressmark.parser import Parser
        >>> doc = Parser("hello").parse()
        >>> PostScriptRenderer().render_body(doc)
        '(hello ) wshow\\n'

    Raises EmitError for markup commands other than ``title``.

    """

    __slots__ = ("_model", "_kern_charset", "_preamble")

    def __init__(
        self,
        model: LayoutModel | None = None,
        *,
        kern_charset: str | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            model: Layout to render against (defaults to one built from the
                active config, without a font)
            kern_charset: Characters to kern (defaults to config.kern_charset)
        """
        self._model = model if model is not None else LayoutModel.from_config()
        self._kern_charset = kern_charset
        self._preamble: str | None = None

    @property
    def model(self) -> LayoutModel:
        return self._model

    def render(self, node: Document) -> str:
        """Render the full program: preamble, body, trailer."""
        sb = StringBuilder()
        sb.append(self.preamble())
        self._render_children(node, sb)
        sb.append_line("showpage")
        return sb.build()

    def render_body(self, node: Document) -> str:
        """Render only the per-node statements."""
        sb = StringBuilder()
        self._render_children(node, sb)
        return sb.build()

    # =========================================================================
    # Preamble
    # =========================================================================

    def preamble(self) -> str:
        """Constants, procedures, kerning table, font selection, page setup.

        Built once per renderer; the first call fills the kerning cache.
        """
        if self._preamble is None:
            self._preamble = self._build_preamble()
        return self._preamble

    def _build_preamble(self) -> str:
        m = self._model
        charset = self._kern_charset
        if charset is None:
            charset = get_layout_config().kern_charset
        m.populate_kerning(charset)

        sb = StringBuilder()
        sb.append(HEADER)
        sb.append_line(
            f"% Page = {format_number(m.page_width)} x {format_number(m.page_height)} pt"
        )

        constants = (
            ("page_width", m.page_width),
            ("page_height", m.page_height),
            ("top_margin", m.top_margin),
            ("bottom_margin", m.bottom_margin),
            ("left_margin", m.left_margin),
            ("right_margin", m.right_margin),
            ("body_size", m.body_size),
            ("head_size", m.head_size),
            ("line_space", m.line_space),
            ("body_pad", m.body_pad),
            ("head_pad", m.head_pad),
        )
        for name, value in constants:
            sb.statement(f"/{name}", format_number(value), "def")
        sb.statement("/font_name", f"/{m.font_name}", "def")
        sb.statement("/current_size", "body_size", "def")
        sb.append_line()

        sb.append(PROCEDURES)
        sb.append_line()

        table = m.kerning_table()
        if table:
            self._render_kerning(table, sb)
            sb.append(SHOW_KERNED)
        else:
            sb.append(SHOW_PLAIN)
        sb.append_line()

        sb.statement("body_size", "set_size")
        sb.statement("left_margin", "top_margin", "body_size", "sub", "moveto")
        sb.append_line()
        return sb.build()

    def _render_kerning(self, table: list[tuple[tuple[str, str], float]], sb: StringBuilder) -> None:
        """Kerning dictionary keyed by two-character strings, sorted by pair."""
        logger.debug("emitting %d kerning pairs", len(table))
        sb.append_line(f"/kerning {len(table)} dict def")
        sb.append_line("kerning begin")
        for (left, right), value in table:
            sb.statement(ps_string(left + right), format_number(value), "def")
        sb.append_line("end")
        sb.append_line()

    # =========================================================================
    # Body
    # =========================================================================

    def _render_children(self, node: Document, sb: StringBuilder) -> None:
        for child in node.children:
            self._render_node(child, sb)

    def _render_node(self, node: Inline, sb: StringBuilder) -> None:
        """Render one document node."""
        match node:
            case Word():
                self._render_word(node.text, sb)
            case ParaBreak():
                sb.statement("body_pad", "next_line", "page_check")
            case Markup(cmd="title"):
                self._render_title(node, sb)
            case Markup(cmd=""):
                raise EmitError("", "empty markup block")
            case Markup():
                raise EmitError(node.cmd)

    def _render_word(self, text: str, sb: StringBuilder) -> None:
        # The pad space goes inside the literal so words stay separated
        sb.statement(ps_string(text + " "), "wshow")

    def _render_title(self, node: Markup, sb: StringBuilder) -> None:
        sb.statement("head_pad", "next_line", "page_check")
        sb.statement("head_size", "set_size")
        for arg in node.args:
            self._render_word(arg, sb)
        sb.statement("body_size", "set_size")
        sb.statement("body_pad", "next_line", "page_check")
