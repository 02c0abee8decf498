"""Typed document nodes for pressmark.

All nodes are frozen dataclasses with slots. The node set is closed:
a document is a flat, ordered sequence of words, paragraph breaks and
markup blocks. Renderers dispatch on it with ``match``.

Node Hierarchy:
Node (base)
├── Word
├── ParaBreak
├── Markup
└── Document

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass

from pressmark.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all document nodes.

    All nodes track their source location for error messages.

    """

    location: SourceLocation


@dataclass(frozen=True, slots=True)
class Word(Node):
    """A single whitespace-delimited word of body text."""

    text: str


@dataclass(frozen=True, slots=True)
class ParaBreak(Node):
    """Paragraph boundary (a blank line outside any markup block)."""


@dataclass(frozen=True, slots=True)
class Markup(Node):
    """A closed ``{cmd arg...}`` block.

    Markup: {title Some Heading}
    Node: Markup(cmd="title", args=("Some", "Heading"))

    """

    cmd: str
    args: tuple[str, ...] = ()


# PEP 695 type alias for document content
type Inline = Word | ParaBreak | Markup


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node: the ordered sequence of parsed nodes."""

    children: tuple[Inline, ...]

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self):
        return iter(self.children)
