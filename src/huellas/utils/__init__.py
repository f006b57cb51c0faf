"""Utility modules for Huellas.

Provides:
- text: escape, unescape, decode_uri_component
- logger: get_logger for logging
"""

from huellas.utils.logger import get_logger
from huellas.utils.text import decode_uri_component, escape, unescape

__all__ = [
    "decode_uri_component",
    "escape",
    "get_logger",
    "unescape",
]
