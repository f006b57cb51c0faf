"""Logger access for Huellas modules.

Everything Huellas logs goes under the ``huellas`` logger namespace, at
DEBUG level only: rejected URLs, failing highlighters, a missing Rosettes.
The package never attaches handlers or sets levels; enable the records with
``logging.getLogger("huellas").setLevel(logging.DEBUG)`` in the application.

Example:
    >>> from huellas.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Dropped link with rejected scheme")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name`` inside the ``huellas`` namespace.

    Names outside the package are nested under it, so third-party callers
    of this helper cannot log outside ``huellas.*``.

    Example:
        >>> get_logger("mymodule").name
        'huellas.mymodule'
    """
    if name != "huellas" and not name.startswith("huellas."):
        name = f"huellas.{name}"
    return logging.getLogger(name)
