"""Plain-text renderer — structured text instead of HTML.

Outputs markdown-like plain text with explicit labels for code, math and
images. Useful for search indexing, previews and model prompts.

Example:
    >>> renderer = PlainTextRenderer()
    >>> renderer.heading("Hello World", 1, "Hello World")
    '# Hello World\\n\\n'
    >>> renderer.link("https://x.com", None, "click")
    'click (https://x.com)'
"""

from collections.abc import Mapping
from typing import Any

from huellas.anchors import strip_id_markers
from huellas.config import RendererOptions, get_render_options
from huellas.renderers.protocol import CellFlags
from huellas.sanitize import is_safe_url


class PlainTextRenderer:
    """Render markdown constructs to structured plain text.

    No HTML. Preserves hierarchy via markdown-like markers.
    Labels non-text content explicitly. Honours ``sanitize``;
    other options have no plain-text meaning.
    """

    __slots__ = ("options",)

    def __init__(self, options: RendererOptions | None = None, **overrides: Any) -> None:
        base = options if options is not None else get_render_options()
        self.options: RendererOptions = base.merge(overrides)

    def code(self, code: str, lang: str | None = None, escaped: bool = False) -> str:
        tag = f"[code:{lang}]" if lang else "[code]"
        return f"{tag}\n{code}\n[/code]\n\n"

    def blockquote(self, quote: str) -> str:
        lines = quote.rstrip("\n").split("\n")
        return "".join(f"> {line}\n" if line else ">\n" for line in lines) + "\n"

    def html(self, html: str) -> str:
        return ""  # Skip raw HTML in text output

    def heading(self, text: str, level: int, raw: str) -> str:
        return "#" * level + " " + strip_id_markers(text).strip() + "\n\n"

    def hr(self) -> str:
        return "---\n\n"

    def list(self, body: str, ordered: bool = False) -> str:
        """Join items; ordered lists number each top-level item line.

        listitem() indents everything after an item's first line, so
        nested list markers never sit at column 0.
        """
        if not ordered:
            return body + "\n"
        numbered = []
        number = 0
        for line in body.splitlines(keepends=True):
            if line.startswith("- "):
                number += 1
                line = f"{number}. {line[2:]}"
            numbered.append(line)
        return "".join(numbered) + "\n"

    def listitem(self, text: str) -> str:
        first, *rest = text.strip().split("\n")
        lines = [f"- {first}"] + [f"  {line}" if line else "" for line in rest]
        return "\n".join(lines) + "\n"

    def paragraph(self, text: str) -> str:
        return f"{text}\n\n"

    def table(self, header: str, body: str) -> str:
        return f"{header}{body}\n"

    def tablerow(self, content: str) -> str:
        cells = content.rstrip("\n").split("\n")
        return "| " + " | ".join(cells) + " |\n"

    def tablecell(self, content: str, flags: CellFlags | Mapping[str, Any]) -> str:
        return content.replace("\n", " ") + "\n"

    def math(self, content: str, language: str, display: bool = False) -> str:
        return f"[math] {content} [/math]"

    def strong(self, text: str) -> str:
        return text

    def em(self, text: str) -> str:
        return text

    def codespan(self, text: str) -> str:
        return text

    def br(self) -> str:
        return " "

    def del_(self, text: str) -> str:
        return text

    def reffn(self, refname: str) -> str:
        return f"[^{refname}]"

    def footnote(self, refname: str, text: str) -> str:
        return f"[^{refname}]: {text}\n\n"

    def link(self, href: str, title: str | None, text: str) -> str:
        if self.options.sanitize and not is_safe_url(href):
            return ""
        return f"{text} ({href})"

    def image(self, href: str, title: str | None, text: str) -> str:
        if self.options.sanitize and not is_safe_url(href):
            return ""
        return f"[image: {text}]"
