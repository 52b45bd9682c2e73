from __future__ import annotations

"""Ordered stop table shared by the scale generators and the assembler.

Lower keys are lighter. The sentinel stops anchor the ends of the
distribution and are dropped before output.
"""

from typing import Tuple

STOPS: Tuple[int, ...] = (0, 50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 1000)
BASE_STOP = 500
SENTINEL_STOPS: Tuple[int, ...] = (0, 1000)
OUTPUT_STOPS: Tuple[int, ...] = tuple(s for s in STOPS if s not in SENTINEL_STOPS)

BASE_INDEX = STOPS.index(BASE_STOP)


def is_sentinel(stop: int) -> bool:
    return stop in SENTINEL_STOPS


def stop_label(stop: int) -> str:
    """Return the output label of a stop (``50`` -> ``"c50"``)."""
    return f"c{stop}"


__all__ = [
    "STOPS",
    "BASE_STOP",
    "BASE_INDEX",
    "SENTINEL_STOPS",
    "OUTPUT_STOPS",
    "is_sentinel",
    "stop_label",
]
