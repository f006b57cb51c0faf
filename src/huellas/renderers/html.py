"""HTML renderer for parsed markdown constructs.

Each method turns one construct into an HTML fragment. Block fragments end
with a newline so that concatenated siblings read one per line.

Thread Safety:
Options are frozen at construction and methods keep no state between calls.
Multiple threads can safely share a single HtmlRenderer instance.

Heading Anchors:
Headings get an ``id`` from an explicit ``{#id}`` marker in their source,
or one derived from the source text (see huellas.anchors).
"""

from collections.abc import Mapping
from typing import Any

from huellas.anchors import create_id, explicit_id, strip_id_markers
from huellas.config import RendererOptions, get_render_options
from huellas.renderers.protocol import CellFlags
from huellas.sanitize import is_safe_url
from huellas.utils.logger import get_logger
from huellas.utils.text import escape

logger = get_logger(__name__)


class HtmlRenderer:
    """Render markdown constructs to HTML fragments.

    Usage:
        >>> renderer = HtmlRenderer()
        >>> renderer.heading("Hello <em>World</em>", 1, "Hello *World*")
        '<h1 id="hello-world">Hello <em>World</em></h1>\\n'
        >>> renderer.paragraph(renderer.strong("Bold"))
        '<p><strong>Bold</strong></p>\\n'

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
    """

    __slots__ = ("options",)

    def __init__(self, options: RendererOptions | None = None, **overrides: Any) -> None:
        """Initialize renderer.

        Args:
            options: Renderer options. Defaults to the context-local options
                (huellas.config.get_render_options) at construction time.
            **overrides: Individual options applied on top of ``options``,
                e.g. ``xhtml=True`` or ``langPrefix="language-"``
        """
        base = options if options is not None else get_render_options()
        self.options: RendererOptions = base.merge(overrides)

    # =========================================================================
    # Block rendering
    # =========================================================================

    def code(self, code: str, lang: str | None = None, escaped: bool = False) -> str:
        """Render a code block, highlighted when a highlighter is configured."""
        highlight = self.options.highlight
        if highlight is not None:
            try:
                out = highlight(code, lang)
            except Exception:
                logger.debug("Syntax highlighting failed for language %r", lang, exc_info=True)
                out = None
            if out is not None and out != code:
                escaped = True
                code = out

        body = code if escaped else escape(code, True)
        if not lang:
            return f"<pre><code>{body}\n</code></pre>"

        lang_class = self.options.lang_prefix + escape(lang, True)
        return f'<pre><code class="{lang_class}">{body}\n</code></pre>\n'

    def blockquote(self, quote: str) -> str:
        return f"<blockquote>\n{quote}</blockquote>\n"

    def html(self, html: str) -> str:
        """Pass raw HTML through untouched."""
        return html

    def _create_id(self, text: str) -> str:
        return create_id(text)

    def heading(self, text: str, level: int, raw: str) -> str:
        """Render a heading with an anchor id.

        Args:
            text: Inline-rendered heading content
            level: Heading level, 1-6
            raw: Unrendered heading source, used for the id

        Returns:
            ``<hN id="...">text</hN>`` with ``{#...}`` markers removed from
            the text. The id attribute is omitted when auto ids are disabled
            and the source has no marker.
        """
        anchor = explicit_id(raw)
        if not anchor and self.options.header_auto_id:
            anchor = self._create_id(raw)

        id_attr = f' id="{anchor}"' if anchor else ""
        return f"<h{level}{id_attr}>{strip_id_markers(text)}</h{level}>\n"

    def hr(self) -> str:
        return "<hr/>\n" if self.options.xhtml else "<hr>\n"

    def list(self, body: str, ordered: bool = False) -> str:
        tag = "ol" if ordered else "ul"
        return f"<{tag}>\n{body}</{tag}>\n"

    def listitem(self, text: str) -> str:
        return f"<li>{text}</li>\n"

    def paragraph(self, text: str) -> str:
        return f"<p>{text}</p>\n"

    def table(self, header: str, body: str) -> str:
        """Render a table from pre-rendered header and body rows."""
        return (
            "<table>\n"
            f"<thead>\n{header}</thead>\n"
            f"<tbody>\n{body}</tbody>\n"
            "</table>\n"
        )

    def tablerow(self, content: str) -> str:
        return f"<tr>\n{content}</tr>\n"

    def tablecell(self, content: str, flags: CellFlags | Mapping[str, Any]) -> str:
        """Render a header or data cell, with inline alignment if given."""
        flags = CellFlags.coerce(flags)
        tag = "th" if flags.header else "td"
        style = f' style="text-align:{flags.align}"' if flags.align else ""
        return f"<{tag}{style}>{content}</{tag}>\n"

    def math(self, content: str, language: str, display: bool = False) -> str:
        """Wrap math source in a script tag for client-side typesetting.

        ``language`` is the script type, e.g. ``math/tex``; display math adds
        ``; mode=display`` (the MathJax convention).
        """
        mode = "; mode=display" if display else ""
        return f'<script type="{language}{mode}">{content}</script>'

    # =========================================================================
    # Span rendering
    # =========================================================================

    def strong(self, text: str) -> str:
        return f"<strong>{text}</strong>"

    def em(self, text: str) -> str:
        return f"<em>{text}</em>"

    def codespan(self, text: str) -> str:
        return f"<code>{text}</code>"

    def br(self) -> str:
        return "<br/>" if self.options.xhtml else "<br>"

    def del_(self, text: str) -> str:
        return f"<del>{text}</del>"

    def reffn(self, refname: str) -> str:
        """Render a footnote reference linking to ``fn_<refname>``."""
        return f'<sup><a href="#fn_{refname}" id="reffn_{refname}">{refname}</a></sup>'

    def footnote(self, refname: str, text: str) -> str:
        """Render a footnote body linking back to its reference."""
        back = (
            f'<a href="#reffn_{refname}" '
            f'title="Jump back to footnote [{refname}] in the text."> &#8617;</a>'
        )
        return (
            f'<blockquote id="fn_{refname}">\n'
            f"<sup>{refname}</sup>. {text}{back}\n"
            "</blockquote>\n"
        )

    def link(self, href: str, title: str | None, text: str) -> str:
        """Render an anchor.

        With ``sanitize`` enabled, links whose URL uses the ``javascript:``
        scheme, or cannot be decoded, render as an empty string.
        """
        if self.options.sanitize and not is_safe_url(href):
            return ""
        title_attr = f' title="{title}"' if title else ""
        return f'<a href="{href}"{title_attr}>{text}</a>'

    def image(self, href: str, title: str | None, text: str) -> str:
        """Render an image; ``text`` becomes the alt attribute.

        Sanitized the same way as link().
        """
        if self.options.sanitize and not is_safe_url(href):
            return ""
        title_attr = f' title="{title}"' if title else ""
        close = "/>" if self.options.xhtml else ">"
        return f'<img src="{href}" alt="{text}"{title_attr}{close}'
