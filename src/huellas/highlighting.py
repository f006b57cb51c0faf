"""Syntax highlighting adapters for Huellas.

Renderers accept a plain ``highlight(code, lang) -> str | None`` callback.
The renderer wraps whatever the callback returns in its own
``<pre><code>`` block, so callbacks return token markup only.
This module turns richer highlighter objects into that callback.
When huellas[syntax] is installed, Rosettes can be used directly.

Usage:
    # Any callable works
    def my_highlighter(code: str, lang: str | None) -> str | None:
        return None if lang != "python" else colorize(code)

    renderer = HtmlRenderer(highlight=my_highlighter)

    # Protocol objects
    renderer = HtmlRenderer(highlight=as_highlight_callback(MyHighlighter()))

    # Rosettes, if installed
    renderer = HtmlRenderer(highlight=rosettes_highlighter())

Contract:
    A callback returns markup that is already HTML-escaped, or None to let
    the renderer escape the code itself. It must not mutate renderer state.
"""

from __future__ import annotations

import re
from typing import Protocol

from huellas.config import HighlightCallback
from huellas.utils.logger import get_logger

logger = get_logger(__name__)

_PRE_BLOCK = re.compile(r"<pre\b[^>]*>(.*)</pre>", re.DOTALL)
_CODE_WRAPPER = re.compile(r"<code\b[^>]*>(.*)</code>", re.DOTALL)


class Highlighter(Protocol):
    """Protocol for syntax highlighters.

    Must be safe to call from several render threads at once.
    """

    def highlight(self, code: str, language: str) -> str:
        """Return ``code`` as HTML-escaped, highlighted markup."""
        ...

    def supports_language(self, language: str) -> bool:
        """Report whether ``language`` can be highlighted. Must not raise."""
        ...


def as_highlight_callback(highlighter: Highlighter) -> HighlightCallback:
    """Adapt a Highlighter object to the renderer callback signature.

    The callback returns None (renderer escapes the code itself) when no
    language is given or the highlighter does not support it.

    Args:
        highlighter: Object implementing the Highlighter protocol

    Returns:
        ``(code, lang) -> str | None`` callback
    """

    def callback(code: str, lang: str | None) -> str | None:
        if not lang or not highlighter.supports_language(lang):
            return None
        return highlighter.highlight(code, lang)

    return callback


def strip_block_wrapper(markup: str) -> str:
    """Reduce a complete highlighted block to the markup inside it.

    ``<div><pre><code class="x">TOKENS\\n</code></pre></div>`` becomes
    ``TOKENS``. Markup without a ``<pre>`` element is returned unchanged.
    """
    match = _PRE_BLOCK.search(markup)
    if match is None:
        return markup
    inner = match.group(1)
    code = _CODE_WRAPPER.fullmatch(inner.strip())
    if code is not None:
        inner = code.group(1)
    return inner.rstrip("\n")


def rosettes_highlighter() -> HighlightCallback | None:
    """Return a callback backed by Rosettes.

    Rosettes renders a full block; the callback keeps only the token
    markup so the renderer's own ``<pre><code>`` stays the sole wrapper.

    Returns:
        The callback, or None when Rosettes is not installed.
    """
    try:
        import rosettes  # type: ignore[import-not-found]
    except ImportError:
        logger.debug("Rosettes not installed; syntax highlighting unavailable")
        return None

    class RosettesHighlighter:
        """Rosettes-based syntax highlighter implementing Highlighter protocol."""

        def highlight(self, code: str, language: str) -> str:
            result: str = rosettes.highlight(code, language=language)
            return strip_block_wrapper(result)

        def supports_language(self, language: str) -> bool:
            try:
                result: bool = rosettes.supports_language(language)
                return result
            except Exception:
                return False

    return as_highlight_callback(RosettesHighlighter())
