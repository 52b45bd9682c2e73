from __future__ import annotations

"""Shaping generated palettes into the structures consumers use.

This module provides :func:`shape_output` (palette name -> stop -> hex),
the :func:`palette_from_hex` convenience wrapper with fixed defaults, and
:func:`export_palette` for listing a palette in other color formats.
"""

from enum import Enum
from typing import Dict, Iterable, List, Sequence, Tuple, Union

from .convert import hex_to_hsl, hex_to_rgb
from .palette import Palette, PaletteConfig, Swatch
from .stops import is_sentinel, stop_label
from .swatches import generate_palette

PaletteLike = Union[Palette, Tuple[str, Sequence[Swatch]]]


class ExportFormat(Enum):
    """Supported output formats for exported swatch lists."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    FULL = "full"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


def _unpack(palette: PaletteLike) -> Tuple[str, Sequence[Swatch]]:
    if isinstance(palette, Palette):
        return palette.name, palette.swatches
    name, swatches = palette
    return name, swatches


def shape_output(palettes: Iterable[PaletteLike]) -> Dict[str, Dict[int, str]]:
    """Map each palette name to ``{stop: HEX}``, sentinel stops removed.

    Later palettes overwrite earlier ones with the same name.
    """
    shaped: Dict[str, Dict[int, str]] = {}
    for palette in palettes:
        name, swatches = _unpack(palette)
        shaped[name] = {
            sw.stop: sw.hex.upper() for sw in swatches if not is_sentinel(sw.stop)
        }
    return shaped


def palette_from_hex(value: str) -> Dict[str, str]:
    """Ten-stop palette for ``value`` with default tweaks, keyed ``c50``..``c900``."""
    config = PaletteConfig(value=value.replace("#", "").upper())
    shaped = shape_output([(config.name, generate_palette(config))])[config.name]
    return {stop_label(stop): hex_value for stop, hex_value in shaped.items()}


def export_palette(palette: PaletteLike, fmt: ExportFormat | str) -> List[object]:
    """List the non-sentinel swatches of ``palette`` in the desired format."""
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    _, swatches = _unpack(palette)
    visible = [sw for sw in swatches if not is_sentinel(sw.stop)]
    if export_fmt == ExportFormat.HEX:
        return [sw.hex for sw in visible]
    if export_fmt == ExportFormat.RGB:
        return [hex_to_rgb(sw.hex) for sw in visible]
    if export_fmt == ExportFormat.HSL:
        return [hex_to_hsl(sw.hex) for sw in visible]
    if export_fmt == ExportFormat.FULL:
        return [sw.as_dict() for sw in visible]
    raise ValueError(f"Unsupported export format: {fmt}")


__all__ = [
    "ExportFormat",
    "shape_output",
    "palette_from_hex",
    "export_palette",
]
