"""pressmark renderers.

Renderers convert a parsed Document into an output program.

Available Renderers:
- PostScriptRenderer: Renders a Document against a LayoutModel as PostScript

"""

from pressmark.renderers.postscript import PostScriptRenderer
from pressmark.renderers.protocol import DocumentRenderer

__all__ = ["DocumentRenderer", "PostScriptRenderer"]
