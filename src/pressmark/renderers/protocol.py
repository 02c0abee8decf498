"""DocumentRenderer protocol — stable interface for document renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
The built-in ``PostScriptRenderer`` is the reference implementation.

Example:
    from pressmark.renderers.protocol import DocumentRenderer

    def typeset(renderer: DocumentRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from pressmark.nodes import Document


class DocumentRenderer(Protocol):
    """Protocol for document renderers."""

    def render(self, node: Document) -> str:
        """Render a Document to a complete output program.

        Args:
            node: The parsed document.

        Returns:
            Rendered string output.

        """
        ...
