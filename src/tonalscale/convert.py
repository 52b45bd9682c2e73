from __future__ import annotations

"""Conversions between hex strings, RGB, HSL and relative luminance.

The scalar converters are lenient: malformed hex input degrades to zero
channels instead of raising, unless ``strict=True`` is requested. All
rounding is half-up (``floor(x + 0.5)``) so generated palettes match the
reference palettes bit for bit; Python's built-in ``round`` would round
half to even.

The ``*_array`` variants evaluate many lightness values at once with
NumPy and are used by the luminance search in :mod:`tonalscale.swatches`.
"""

import math
import string
from decimal import ROUND_HALF_UP, Decimal
from typing import Tuple

import numpy as np

from .errors import InvalidColorFormat

RGB = Tuple[int, int, int]
HSL = Tuple[float, float, float]

# WCAG 2.0 relative luminance, expressed on a 0-100 scale.
LUMINANCE_COEFFS = (21.26, 71.52, 7.22)
LINEAR_THRESHOLD = 0.03928

_HEX_DIGITS = frozenset(string.hexdigits)


def round_half_up(value: float, precision: int = 0) -> float:
    """Round ``value`` to ``precision`` decimals, ties toward +inf."""
    multiplier = 10**precision
    return math.floor(value * multiplier + 0.5) / multiplier


def _to_fixed(value: float, digits: int) -> float:
    # Decimal(value) is the exact binary value, so ties are decided the
    # same way a fixed-point formatter would decide them.
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _hex_digits(value: str, strict: bool) -> str:
    t = value.strip()
    if t.startswith("#"):
        t = t[1:]
    if len(t) not in (3, 6):
        if strict:
            raise InvalidColorFormat(
                f"invalid hex color length: '{value}' (expected RGB or RRGGBB)"
            )
        return ""
    if strict and not all(ch in _HEX_DIGITS for ch in t):
        raise InvalidColorFormat(f"invalid hex color: '{value}'")
    if len(t) == 3:
        t = "".join(ch * 2 for ch in t)
    return t


def _parse_channel(pair: str) -> int:
    if not all(ch in _HEX_DIGITS for ch in pair):
        return 0
    return int(pair, 16)


def normalize_hex(value: str, *, strict: bool = False) -> str:
    """Return ``value`` as ``#RRGGBB``.

    Markers are stripped and the 3-digit form is expanded. Input that is not
    3 or 6 digits long is returned uppercased with a single ``#`` prefix in
    lenient mode.
    """
    digits = _hex_digits(value, strict)
    if not digits:
        return "#" + value.strip().lstrip("#").upper()
    return "#" + digits.upper()


def hex_to_rgb(value: str, *, strict: bool = False) -> RGB:
    """Parse a 3- or 6-digit hex color, with or without ``#``."""
    digits = _hex_digits(value, strict)
    if not digits:
        return (0, 0, 0)
    return (
        _parse_channel(digits[0:2]),
        _parse_channel(digits[2:4]),
        _parse_channel(digits[4:6]),
    )


def hex_to_hsl(value: str, *, strict: bool = False) -> HSL:
    """Convert a hex color to (hue degrees, saturation %, lightness %).

    Hue is rounded to an integer and lies in [0, 360). Saturation and
    lightness are rounded to one decimal.
    """
    r, g, b = (c / 255 for c in hex_to_rgb(value, strict=strict))
    cmin = min(r, g, b)
    cmax = max(r, g, b)
    delta = cmax - cmin

    if delta == 0:
        h = 0.0
    elif cmax == r:
        h = math.fmod((g - b) / delta, 6)
    elif cmax == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4

    h = round_half_up(h * 60)
    if h < 0:
        h += 360

    lightness = (cmax + cmin) / 2
    saturation = 0.0 if delta == 0 else delta / (1 - abs(2 * lightness - 1))
    return (h, _to_fixed(saturation * 100, 1), _to_fixed(lightness * 100, 1))


# Per 60 degree sector: which of (chroma, intermediate, zero) feeds r, g, b.
_C, _X, _Z = 0, 1, 2
_SECTORS = (
    (_C, _X, _Z),
    (_X, _C, _Z),
    (_Z, _C, _X),
    (_Z, _X, _C),
    (_X, _Z, _C),
    (_C, _Z, _X),
)


def _sector(h: float) -> Tuple[int, int, int]:
    # A hue outside [0, 360) belongs to no sector: only the lightness match remains.
    if not 0 <= h < 360:
        return (_Z, _Z, _Z)
    return _SECTORS[int(h // 60)]


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL (degrees, %, %) to integer RGB channels."""
    s /= 100
    l /= 100
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs(math.fmod(h / 60, 2) - 1))
    m = l - c / 2
    parts = (c, x, 0.0)
    r, g, b = (parts[i] for i in _sector(h))
    return (
        int(round_half_up((r + m) * 255)),
        int(round_half_up((g + m) * 255)),
        int(round_half_up((b + m) * 255)),
    )


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL to a lowercase ``#rrggbb`` string."""
    r, g, b = hsl_to_rgb(h, s, l)
    return f"#{r:02x}{g:02x}{b:02x}"


def _linearize(channel: float) -> float:
    c = channel / 255
    return c / 12.92 if c < LINEAR_THRESHOLD else ((c + 0.055) / 1.055) ** 2.4


def luminance_from_rgb(r: float, g: float, b: float) -> float:
    """WCAG 2.0 relative luminance of an RGB color, on a 0-100 scale."""
    kr, kg, kb = LUMINANCE_COEFFS
    return kr * _linearize(r) + kg * _linearize(g) + kb * _linearize(b)


def luminance_from_hex(value: str, *, strict: bool = False) -> float:
    """Relative luminance of a hex color, rounded to 2 decimals."""
    r, g, b = hex_to_rgb(value, strict=strict)
    return round_half_up(luminance_from_rgb(r, g, b), 2)


def hsl_to_rgb_array(h: float, s: float, lightness: np.ndarray) -> np.ndarray:
    """Vectorized :func:`hsl_to_rgb` over an array of lightness values.

    Returns an ``(n, 3)`` float array of rounded channels.
    """
    l = np.asarray(lightness, dtype=np.float64) / 100.0
    s = s / 100
    c = (1 - np.abs(2 * l - 1)) * s
    x = c * (1 - abs(math.fmod(h / 60, 2) - 1))
    m = l - c / 2
    parts = (c, x, np.zeros_like(l))
    rgb = np.stack([parts[i] for i in _sector(h)], axis=1) + m[:, None]
    return np.floor(rgb * 255 + 0.5)


def luminance_from_rgb_array(rgb: np.ndarray) -> np.ndarray:
    """Vectorized :func:`luminance_from_rgb` over an ``(n, 3)`` array."""
    c = np.asarray(rgb, dtype=np.float64) / 255.0
    linear = np.where(
        c < LINEAR_THRESHOLD,
        c / 12.92,
        # Clipped: negative bases only occur in the unselected branch.
        np.power(np.maximum((c + 0.055) / 1.055, 0.0), 2.4),
    )
    kr, kg, kb = LUMINANCE_COEFFS
    return kr * linear[:, 0] + kg * linear[:, 1] + kb * linear[:, 2]


__all__ = [
    "RGB",
    "HSL",
    "round_half_up",
    "normalize_hex",
    "hex_to_rgb",
    "hex_to_hsl",
    "hsl_to_rgb",
    "hsl_to_hex",
    "luminance_from_rgb",
    "luminance_from_hex",
    "hsl_to_rgb_array",
    "luminance_from_rgb_array",
]
