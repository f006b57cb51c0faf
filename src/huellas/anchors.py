"""Heading anchor ids.

Derives a valid element id from heading source text. HTML 4 fragment
identifiers must match ``[A-Za-z][A-Za-z0-9:_.-]*``; the ids produced here
are stricter and also exclude colons and periods.

Two strategies, tried in order:
1. Slug: lower-case, collapse every run outside ``[a-z0-9_-]`` to ``-``.
2. Code points: for headings with no usable ASCII (emoji, CJK, symbols),
   join the numeric code point of every character with ``-``.

Either result is prefixed with ``id-`` when it does not start with a letter.

Example:
    >>> create_id("Hello, World!")
    'hello-world'
    >>> create_id("😀")
    'id-128512'
"""

from __future__ import annotations

import re

_ID_MARKER = re.compile(r"\{#(.+)\}")
_OUT_OF_RANGE = re.compile(r"[^a-z0-9_-]+")
_STARTS_WITH_LETTER = re.compile(r"[a-z]")


def create_id(text: str) -> str:
    """Derive a heading id from heading source text.

    Args:
        text: Raw (unrendered) heading source

    Returns:
        Id matching ``^[a-zA-Z][a-zA-Z0-9_-]*$``. Identical input always
        yields an identical id.
    """
    maybe_id = _OUT_OF_RANGE.sub("-", text.lower()).strip("-")

    if not maybe_id:
        maybe_id = "-".join(str(ord(char)) for char in text)

    if not _STARTS_WITH_LETTER.match(maybe_id):
        return f"id-{maybe_id}"
    return maybe_id


def explicit_id(raw: str) -> str | None:
    """Return the token of a ``{#token}`` marker in ``raw``, if any."""
    match = _ID_MARKER.search(raw)
    return match.group(1) if match else None


def strip_id_markers(text: str) -> str:
    """Remove every ``{#...}`` marker from rendered heading text."""
    return _ID_MARKER.sub("", text)
