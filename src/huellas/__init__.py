"""
Huellas — HTML rendering backend for markdown pipelines

A tokenizer walks markdown source and calls one renderer method per
construct; the renderer returns the HTML fragment for it. Headings get
deterministic anchor ids and links can be scheme-filtered.

Quick Start:
    >>> from huellas import HtmlRenderer
    >>> renderer = HtmlRenderer()
    >>> renderer.heading("Hello, World!", 1, "Hello, World!")
    '<h1 id="hello-world">Hello, World!</h1>\\n'

    >>> # Options, marked-style names accepted
    >>> renderer = HtmlRenderer(sanitize=True, langPrefix="language-")
    >>> renderer.link("javascript:alert(1)", None, "click")
    ''

Installation:
    pip install huellas              # Core renderer (zero deps)
    pip install huellas[syntax]      # + Syntax highlighting via Rosettes
"""

from huellas.anchors import create_id
from huellas.config import (
    RendererOptions,
    get_render_options,
    render_options_context,
    reset_render_options,
    set_render_options,
)
from huellas.errors import ConfigError, HuellasError, MalformedURLError
from huellas.highlighting import Highlighter, as_highlight_callback, rosettes_highlighter
from huellas.renderers import CellFlags, HtmlRenderer, PlainTextRenderer, Renderer
from huellas.sanitize import is_safe_url
from huellas.utils.text import decode_uri_component, escape, unescape

__version__ = "0.1.0"

__all__ = [
    # Renderers
    "CellFlags",
    "HtmlRenderer",
    "PlainTextRenderer",
    "Renderer",
    # Options
    "RendererOptions",
    "get_render_options",
    "render_options_context",
    "reset_render_options",
    "set_render_options",
    # Highlighting
    "Highlighter",
    "as_highlight_callback",
    "rosettes_highlighter",
    # Helpers
    "create_id",
    "decode_uri_component",
    "escape",
    "is_safe_url",
    "unescape",
    # Errors
    "ConfigError",
    "HuellasError",
    "MalformedURLError",
    "__version__",
]
