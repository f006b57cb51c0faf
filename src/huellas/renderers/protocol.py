"""Renderer protocol — stable interface for construct renderers.

An upstream parser calls one method per recognized markdown construct and
concatenates the returned strings. Any object providing these methods
conforms; the built-in ``HtmlRenderer`` is the reference implementation and
``PlainTextRenderer`` an alternate one. Callers pick an implementation,
they are not meant to subclass one another.

Example:
    from huellas.renderers.protocol import Renderer

    def render_section(renderer: Renderer, title: str, body: str) -> str:
        return renderer.heading(title, 2, title) + renderer.paragraph(body)

"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal, Protocol

Alignment = Literal["left", "right", "center"]


@dataclass(frozen=True, slots=True)
class CellFlags:
    """Table cell flags passed to ``tablecell``.

    Attributes:
        header: Render as a header cell
        align: Text alignment, or None for the default

    """

    header: bool = False
    align: Alignment | None = None

    @classmethod
    def coerce(cls, flags: "CellFlags | Mapping[str, Any]") -> "CellFlags":
        """Accept CellFlags or a ``{"header": ..., "align": ...}`` mapping."""
        if isinstance(flags, CellFlags):
            return flags
        return cls(header=bool(flags.get("header")), align=flags.get("align") or None)


class Renderer(Protocol):
    """Protocol for construct renderers.

    Every method is synchronous, returns a string, and leaves the renderer
    unchanged. Block methods receive inline content already rendered.

    """

    # Block level

    def code(self, code: str, lang: str | None = None, escaped: bool = False) -> str: ...

    def blockquote(self, quote: str) -> str: ...

    def html(self, html: str) -> str: ...

    def heading(self, text: str, level: int, raw: str) -> str: ...

    def hr(self) -> str: ...

    def list(self, body: str, ordered: bool = False) -> str: ...

    def listitem(self, text: str) -> str: ...

    def paragraph(self, text: str) -> str: ...

    def table(self, header: str, body: str) -> str: ...

    def tablerow(self, content: str) -> str: ...

    def tablecell(self, content: str, flags: CellFlags | Mapping[str, Any]) -> str: ...

    def math(self, content: str, language: str, display: bool = False) -> str: ...

    # Span level

    def strong(self, text: str) -> str: ...

    def em(self, text: str) -> str: ...

    def codespan(self, text: str) -> str: ...

    def br(self) -> str: ...

    def del_(self, text: str) -> str: ...

    def reffn(self, refname: str) -> str: ...

    def footnote(self, refname: str, text: str) -> str: ...

    def link(self, href: str, title: str | None, text: str) -> str: ...

    def image(self, href: str, title: str | None, text: str) -> str: ...
