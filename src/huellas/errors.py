"""Exception classes for Huellas.

Provides standardized exceptions for error handling throughout Huellas.
"""

from __future__ import annotations


class HuellasError(Exception):
    """Base exception for all Huellas errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(HuellasError):
    """Error in renderer configuration.

    Raised when an option has a value the renderer cannot use.
    """

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending option (e.g., "highlight")
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")


class MalformedURLError(HuellasError, ValueError):
    """Error decoding a percent-encoded URL.

    Raised by decode_uri_component() for a stray ``%`` or for bytes that
    are not valid UTF-8.
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Malformed URL {url!r}: {reason}")
