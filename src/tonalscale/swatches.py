from __future__ import annotations

"""Swatch assembly: seed HSL plus the three tweak tables, stop by stop.

This module provides :func:`generate_palette`, which coordinates hex
parsing, scale generation, hue/saturation correction and the optional
luminance-to-lightness search, and :func:`create_palette`, which wraps
the result in a :class:`tonalscale.palette.Palette`.
"""

import logging
from typing import List, Optional

import numpy as np

from .common import settings
from .convert import (
    hex_to_hsl,
    hsl_to_hex,
    hsl_to_rgb_array,
    luminance_from_hex,
    luminance_from_rgb_array,
    normalize_hex,
)
from .palette import Palette, PaletteConfig, Swatch
from .scales import create_distribution_values, create_hue_scale, create_saturation_scale
from .stops import BASE_STOP

logger = logging.getLogger(__name__)

SATURATION_MAX = 100

# Candidate lightness values in scan order (high to low).
_LIGHTNESS_CANDIDATES = np.arange(99, -1, -1, dtype=np.float64)


def wrap_hue(h: float) -> float:
    """Bring a tweaked hue back into [0, 360].

    Negative hues wrap once around 360 (minus one degree); hues above 720
    and then above 360 are each reduced by 360. Anything still out of range
    after that comes from a tweak larger than a full turn and is folded
    with modulo.
    """
    if h < 0:
        h = 360 + h - 1
    if h > 720:
        h -= 360
    if h > 360:
        h -= 360
    if not 0 <= h <= 360:
        h %= 360
    return h


def clamp_saturation(s: float) -> float:
    # Upper bound only.
    return SATURATION_MAX if s > SATURATION_MAX else s


def lightness_from_hsl_luminance(h: float, s: float, luminance: float) -> int:
    """Integer lightness (0-99) whose color is closest to ``luminance``.

    Every candidate is evaluated; scanning from 99 down to 0, the first
    strictly smaller difference wins, so ties keep the higher lightness.
    """
    rgb = hsl_to_rgb_array(h, s, _LIGHTNESS_CANDIDATES)
    diffs = np.abs(luminance - luminance_from_rgb_array(rgb))
    # argmin returns the first minimum in scan order.
    return int(_LIGHTNESS_CANDIDATES[int(np.argmin(diffs))])


def generate_palette(config: PaletteConfig, *, strict: Optional[bool] = None) -> List[Swatch]:
    """Generate every stop (sentinels included) for ``config``.

    Parameters
    ----------
    config:
        Seed color and tuning parameters. Validated before use.
    strict:
        Reject malformed seed colors with
        :class:`tonalscale.errors.InvalidColorFormat`. Defaults to the
        ``STRICT_HEX`` setting.

    Returns
    -------
    list[Swatch]
        One swatch per stop, lightest first. The base stop always carries
        the normalized seed hex.
    """
    config.validate()
    if strict is None:
        strict = settings.get().STRICT_HEX

    seed_hex = normalize_hex(config.value, strict=strict)
    value_h, value_s, value_l = hex_to_hsl(config.value, strict=strict)

    hue_scale = create_hue_scale(config.h)
    saturation_scale = create_saturation_scale(config.s)

    center = value_l if config.use_lightness else luminance_from_hex(config.value)
    distribution = create_distribution_values(config.l_min, config.l_max, center)

    logger.debug(
        "generating %s from %s (h=%s s=%s l=%s, %s center=%s)",
        config.name,
        seed_hex,
        value_h,
        value_s,
        value_l,
        "lightness" if config.use_lightness else "luminance",
        center,
    )

    swatches: List[Swatch] = []
    for hue, sat, dist in zip(hue_scale, saturation_scale, distribution):
        new_h = wrap_hue(value_h + hue.tweak)
        new_s = clamp_saturation(value_s + sat.tweak)
        if config.use_lightness:
            new_l = dist.tweak
        else:
            new_l = lightness_from_hsl_luminance(new_h, new_s, dist.tweak)

        if hue.stop == BASE_STOP:
            # HSL round-tripping may drift by one step; keep the seed as given.
            new_hex = seed_hex
        else:
            new_hex = hsl_to_hex(new_h, new_s, new_l).upper()

        swatches.append(
            Swatch(
                stop=hue.stop,
                hex=new_hex,
                h=new_h,
                h_scale=hue.tweak,
                s=new_s,
                s_scale=sat.tweak,
                l=new_l,
            )
        )
    return swatches


def create_palette(config: PaletteConfig, *, strict: Optional[bool] = None) -> Palette:
    """Generate swatches for ``config`` and wrap them in a :class:`Palette`."""
    return Palette(config=config, swatches=generate_palette(config, strict=strict))


__all__ = [
    "wrap_hue",
    "clamp_saturation",
    "lightness_from_hsl_luminance",
    "generate_palette",
    "create_palette",
]
