"""Huellas renderers.

Renderers turn parsed markdown constructs into output fragments.

Available Renderers:
- HtmlRenderer: Renders constructs to HTML fragments
- PlainTextRenderer: Renders constructs to structured plain text

Both implement the Renderer protocol; callers choose one.

Thread Safety:
Options are frozen at construction and no method keeps state.
Safe for concurrent use from multiple threads.

"""

from huellas.renderers.html import HtmlRenderer
from huellas.renderers.protocol import CellFlags, Renderer
from huellas.renderers.text import PlainTextRenderer

__all__ = ["CellFlags", "HtmlRenderer", "PlainTextRenderer", "Renderer"]
