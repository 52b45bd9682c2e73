from __future__ import annotations

"""Exception types raised by tonalscale.

All of them derive from ``ValueError`` so callers that already guard
color parsing with ``except ValueError`` keep working.
"""


class TonalScaleError(ValueError):
    """Base class for tonalscale errors."""


class InvalidColorFormat(TonalScaleError):
    """A hex color string could not be parsed (strict mode only)."""


class InvalidConfiguration(TonalScaleError):
    """Palette parameters are out of range or inconsistent."""


__all__ = ["TonalScaleError", "InvalidColorFormat", "InvalidConfiguration"]
