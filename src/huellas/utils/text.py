"""Text processing utilities for Huellas.

Provides the escaping helpers every renderer relies on, plus a strict
percent-decoder used by URL sanitization.

Example:
    >>> from huellas.utils.text import escape, unescape
    >>> escape("<b>Tom & Jerry</b>")
    '&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;'
    >>> unescape("javascript&colon;alert(1)")
    'javascript:alert(1)'
"""

from __future__ import annotations

import re
from urllib.parse import unquote_to_bytes

from huellas.errors import MalformedURLError

# Ampersands that do not already start an entity reference
_BARE_AMPERSAND = re.compile(r"&(?!#?\w+;)", re.ASCII)
_ENTITY = re.compile(r"&([#\w]+);", re.ASCII)
_DECIMAL = re.compile(r"[0-9]+")
_HEX = re.compile(r"[0-9a-f]+")

_PERCENT_RUN = re.compile(r"(?:%[0-9A-Fa-f]{2})+")
_STRAY_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


def escape(text: str, encode_quotes: bool = False) -> str:
    """Escape HTML special characters.

    Args:
        text: Text to escape
        encode_quotes: Escape every ``&``. When False, an ``&`` that already
            begins an entity reference (``&amp;``, ``&#39;``) is kept so that
            pre-escaped input is not double-escaped.

    Returns:
        Text with ``& < > " '`` converted to entities

    Examples:
        >>> escape("a &amp; b")
        'a &amp; b'
        >>> escape("a &amp; b", True)
        'a &amp;amp; b'
    """
    if not text:
        return ""
    if encode_quotes:
        text = text.replace("&", "&amp;")
    else:
        text = _BARE_AMPERSAND.sub("&amp;", text)
    return (
        text.replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def _replace_entity(match: re.Match[str]) -> str:
    name = match.group(1).lower()
    if name == "colon":
        return ":"
    if not name.startswith("#"):
        return ""

    if name.startswith("#x"):
        digits, base, pattern = name[2:], 16, _HEX
    else:
        digits, base, pattern = name[1:], 10, _DECIMAL
    if not pattern.fullmatch(digits):
        return ""
    try:
        return chr(int(digits, base))
    except (ValueError, OverflowError):
        # Code point beyond U+10FFFF
        return ""


def unescape(text: str) -> str:
    """Decode the entity references relevant to URL inspection.

    ``&colon;`` and numeric references (``&#58;``, ``&#x3A;``) are decoded;
    every other named entity is dropped. Never raises.

    Args:
        text: Text possibly containing entity references

    Returns:
        Text with entity references replaced

    Examples:
        >>> unescape("&#106;avascript&#x3A;")
        'javascript:'
        >>> unescape("a&nbsp;b")
        'ab'
    """
    if "&" not in text:
        return text
    return _ENTITY.sub(_replace_entity, text)


def decode_uri_component(text: str) -> str:
    """Percent-decode a URL component as UTF-8, strictly.

    Unlike urllib.parse.unquote(), malformed input is an error instead of
    being passed through.

    Args:
        text: Percent-encoded text

    Returns:
        Decoded text

    Raises:
        MalformedURLError: A ``%`` is not followed by two hex digits, or the
            decoded bytes are not valid UTF-8.

    Examples:
        >>> decode_uri_component("java%73cript%3A")
        'javascript:'
    """
    if "%" not in text:
        return text
    if _STRAY_PERCENT.search(text):
        raise MalformedURLError(text, "'%' not followed by two hex digits")

    def decode_run(match: re.Match[str]) -> str:
        try:
            return unquote_to_bytes(match.group(0)).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedURLError(text, "invalid UTF-8 sequence") from exc

    return _PERCENT_RUN.sub(decode_run, text)
