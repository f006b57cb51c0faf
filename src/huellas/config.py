"""ContextVar-based renderer options for Huellas.

Options are a frozen record handed to a renderer once, at construction.
A context-local default lets applications configure renderers they do
not construct themselves.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit options
    from huellas import HtmlRenderer, RendererOptions
    renderer = HtmlRenderer(RendererOptions(xhtml=True))

    # marked-style option dictionaries
    renderer = HtmlRenderer(RendererOptions.from_dict({"langPrefix": "language-"}))

    # Context default, picked up by renderers built without options
    with render_options_context(RendererOptions(sanitize=True)):
        renderer = HtmlRenderer()

"""

from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any

from huellas.errors import ConfigError

HighlightCallback = Callable[[str, str | None], str | None]

# camelCase spellings accepted for compatibility with JavaScript-style option maps
_OPTION_ALIASES: dict[str, str] = {
    "langPrefix": "lang_prefix",
    "headerPrefix": "header_prefix",
    "headerAutoId": "header_auto_id",
}


@dataclass(frozen=True, slots=True)
class RendererOptions:
    """Immutable renderer configuration.

    Supplied once per renderer and never mutated.
    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        lang_prefix: CSS class prefix for code blocks with a language
        smartypants: Accepted for compatibility; typography is the
            inline lexer's job, so renderers ignore it
        header_prefix: Accepted for compatibility; not applied to heading ids
        header_auto_id: Derive a heading id from its source when no
            explicit ``{#id}`` marker is present
        xhtml: Self-close void elements (``<hr/>``, ``<br/>``, ``<img .../>``)
        sanitize: Drop links and images whose URL uses the ``javascript:`` scheme
        highlight: Optional ``(code, lang) -> str | None`` syntax highlighter

    """

    lang_prefix: str = "lang-"
    smartypants: bool = False
    header_prefix: str = ""
    header_auto_id: bool = True
    xhtml: bool = False
    sanitize: bool = False
    highlight: HighlightCallback | None = None

    def __post_init__(self) -> None:
        if self.highlight is not None and not callable(self.highlight):
            kind = type(self.highlight).__name__
            raise ConfigError("highlight", f"expected a callable, got {kind}")
        for name in ("lang_prefix", "header_prefix"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(name, f"expected a string, got {type(value).__name__}")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "RendererOptions":
        """Create RendererOptions from a dictionary.

        Keys may be field names (``lang_prefix``) or their camelCase
        spellings (``langPrefix``). Unknown keys are silently ignored.

        Args:
            config_dict: Dictionary with option values.

        Returns:
            New RendererOptions instance with values from dict.

        Raises:
            ConfigError: ``highlight`` is not callable, or a prefix is not a string.

        Example:
            >>> options = RendererOptions.from_dict({
            ...     "langPrefix": "language-",
            ...     "xhtml": True,
            ...     "gfm": True,
            ... })
            >>> options.lang_prefix
            'language-'

        """
        return cls(**_normalize_keys(config_dict))

    def to_dict(self) -> dict[str, Any]:
        """Return the options as a camelCase mapping, without the highlighter."""
        reverse = {v: k for k, v in _OPTION_ALIASES.items()}
        return {
            reverse.get(f.name, f.name): getattr(self, f.name)
            for f in fields(self)
            if f.name != "highlight"
        }

    def merge(self, overrides: Mapping[str, Any]) -> "RendererOptions":
        """Return a copy with ``overrides`` applied (same key rules as from_dict)."""
        if not overrides:
            return self
        current = {f.name: getattr(self, f.name) for f in fields(self)}
        current.update(_normalize_keys(overrides))
        return type(self)(**current)


def _normalize_keys(config_dict: Mapping[str, Any]) -> dict[str, Any]:
    valid_fields = {f.name for f in fields(RendererOptions)}
    normalized: dict[str, Any] = {}
    for key, value in config_dict.items():
        name = _OPTION_ALIASES.get(key, key)
        if name in valid_fields:
            normalized[name] = value
    return normalized


# Module-level default options (reused, never recreated)
_DEFAULT_OPTIONS: RendererOptions = RendererOptions()

_render_options: ContextVar[RendererOptions] = ContextVar(
    "render_options",
    default=_DEFAULT_OPTIONS,
)


def get_render_options() -> RendererOptions:
    """Get the current default renderer options (context-local).

    Returns:
        The active RendererOptions for this thread/context.

    """
    return _render_options.get()


def set_render_options(options: RendererOptions) -> None:
    """Set the default renderer options for the current context.

    Args:
        options: RendererOptions used by renderers constructed without options.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _render_options.set(options)


def reset_render_options() -> None:
    """Reset to the module-level default options."""
    _render_options.set(_DEFAULT_OPTIONS)


@contextmanager
def render_options_context(options: RendererOptions) -> Iterator[None]:
    """Context manager for temporary default options.

    Args:
        options: RendererOptions to use within the context.

    Yields:
        None

    Example:
        >>> with render_options_context(RendererOptions(xhtml=True)):
        ...     renderer = HtmlRenderer()
        >>> renderer.hr()
        '<hr/>\\n'

    Thread Safety:
        Only affects the current thread's context. Properly restores the
        previous options even if an exception is raised.

    """
    previous = _render_options.get()
    _render_options.set(options)
    try:
        yield
    finally:
        _render_options.set(previous)


__all__ = [
    "HighlightCallback",
    "RendererOptions",
    "get_render_options",
    "set_render_options",
    "reset_render_options",
    "render_options_context",
]
