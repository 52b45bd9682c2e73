from __future__ import annotations

"""Per-stop tweak tables for hue, saturation and lightness/luminance.

Each generator returns one :class:`ScaleEntry` per stop of
:data:`tonalscale.stops.STOPS`, in table order. Hue and saturation tweaks
are offsets added to the seed color; distribution tweaks are absolute
lightness (or luminance) targets.
"""

from dataclasses import dataclass
from typing import List

from .convert import round_half_up
from .errors import InvalidConfiguration
from .stops import BASE_INDEX, BASE_STOP, STOPS

SATURATION_TWEAK_MAX = 100


@dataclass(frozen=True)
class ScaleEntry:
    """Tweak value for a single stop."""

    stop: int
    tweak: float


def _distance(index: int) -> int:
    return abs(index - BASE_INDEX)


def create_hue_scale(spread: float = 0) -> List[ScaleEntry]:
    """Hue offsets growing linearly with the distance from the base stop."""
    return [
        ScaleEntry(stop, spread * _distance(i) if spread else 0)
        for i, stop in enumerate(STOPS)
    ]


def create_saturation_scale(spread: float = 0) -> List[ScaleEntry]:
    """Saturation offsets, accelerating away from the base stop, capped at 100."""
    entries: List[ScaleEntry] = []
    for i, stop in enumerate(STOPS):
        d = _distance(i)
        tweak = round_half_up((d + 1) * spread * (1 + d / 10)) if spread else 0
        entries.append(ScaleEntry(stop, min(tweak, SATURATION_TWEAK_MAX)))
    return entries


def create_distribution_values(
    minimum: float = 0,
    maximum: float = 100,
    center: float = 50,
) -> List[ScaleEntry]:
    """Absolute targets from ``maximum`` (stop 0) through ``center`` to ``minimum``.

    Parameters
    ----------
    minimum:
        Target at the darkest sentinel (stop 1000).
    maximum:
        Target at the lightest sentinel (stop 0).
    center:
        The seed's own lightness or luminance, placed unmodified at the
        base stop.

    Intermediate stops are interpolated linearly in stop-key space and
    rounded to integers.
    """
    if minimum > maximum:
        raise InvalidConfiguration(
            f"distribution minimum ({minimum}) must not exceed maximum ({maximum})"
        )

    first, last = STOPS[0], STOPS[-1]
    lighter_span = (BASE_STOP - first) / 100
    darker_span = (last - BASE_STOP) / 100

    entries: List[ScaleEntry] = []
    for stop in STOPS:
        if stop == first:
            tweak = maximum
        elif stop == last:
            tweak = minimum
        elif stop == BASE_STOP:
            tweak = center
        elif stop < BASE_STOP:
            diff = (BASE_STOP - stop) / 100
            tweak = round_half_up((maximum - center) / lighter_span * diff + center)
        else:
            diff = (stop - BASE_STOP) / 100
            tweak = round_half_up(center - (center - minimum) / darker_span * diff)
        entries.append(ScaleEntry(stop, tweak))
    return entries


__all__ = [
    "ScaleEntry",
    "create_hue_scale",
    "create_saturation_scale",
    "create_distribution_values",
]
