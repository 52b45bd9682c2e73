"""Public entrypoint for the tonalscale library.

Generate a tonal palette (stops 50-900) from a single seed color. This
module re-exports the user-facing types and functions so applications can
import from ``tonalscale`` instead of the individual submodules.
"""

from .convert import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    luminance_from_hex,
    luminance_from_rgb,
    normalize_hex,
)
from .errors import InvalidColorFormat, InvalidConfiguration, TonalScaleError
from .output import ExportFormat, export_palette, palette_from_hex, shape_output
from .palette import Palette, PaletteConfig, Swatch
from .scales import (
    ScaleEntry,
    create_distribution_values,
    create_hue_scale,
    create_saturation_scale,
)
from .stops import BASE_STOP, OUTPUT_STOPS, SENTINEL_STOPS, STOPS
from .swatches import create_palette, generate_palette

__version__ = "0.1.0"

__all__ = [
    "hex_to_rgb",
    "hex_to_hsl",
    "hsl_to_rgb",
    "hsl_to_hex",
    "luminance_from_rgb",
    "luminance_from_hex",
    "normalize_hex",
    "TonalScaleError",
    "InvalidColorFormat",
    "InvalidConfiguration",
    "PaletteConfig",
    "Swatch",
    "Palette",
    "ScaleEntry",
    "create_hue_scale",
    "create_saturation_scale",
    "create_distribution_values",
    "generate_palette",
    "create_palette",
    "shape_output",
    "palette_from_hex",
    "ExportFormat",
    "export_palette",
    "STOPS",
    "BASE_STOP",
    "SENTINEL_STOPS",
    "OUTPUT_STOPS",
]
