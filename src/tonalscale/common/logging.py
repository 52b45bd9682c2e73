"""
Logging setup for tonalscale entry points.

Library modules only call `logging.getLogger(__name__)`; handlers are
installed by whoever runs the program. The CLI calls
`setup_default_logging` so a bare `python -m tonalscale` still reports
warnings and, with TONALSCALE_LOG_LEVEL=DEBUG, the generation trace.
"""

from __future__ import annotations

import logging

from . import settings

PACKAGE_LOGGER = "tonalscale"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """Set the package log level and install a stderr handler once.

    - `level=None` uses the LOG_LEVEL setting
    - The root handler is left alone if the application configured one
    """
    lvl = _resolve_level(level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(lvl)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["PACKAGE_LOGGER", "setup_default_logging"]
