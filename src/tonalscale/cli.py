"""
Command line front end.

Usage:
    python -m tonalscale 22C55E
    python -m tonalscale "#3B82F6" --hue 2 --saturation 1 --format full
    python -m tonalscale --config palettes.yaml

Prints a JSON object mapping each palette name to its swatches.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence

from .common import setup_default_logging
from .config import default_tweaks, load_palette_configs
from .errors import TonalScaleError
from .output import ExportFormat, export_palette, shape_output
from .palette import Palette, PaletteConfig
from .stops import stop_label
from .swatches import create_palette

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tonalscale",
        description="Generate a tonal palette (50-900) from seed hex colors.",
    )
    p.add_argument("colors", nargs="*", help="seed colors, e.g. 22C55E or '#22c55e'")
    p.add_argument("--hue", type=float, default=None, help="hue spread per stop (degrees)")
    p.add_argument("--saturation", type=float, default=None, help="saturation spread factor")
    p.add_argument("--l-min", type=float, default=None, help="darkest distribution bound (0-100)")
    p.add_argument("--l-max", type=float, default=None, help="lightest distribution bound (0-100)")
    p.add_argument(
        "--luminance",
        action="store_true",
        help="distribute relative luminance instead of HSL lightness",
    )
    p.add_argument(
        "--format",
        choices=[fmt.value for fmt in ExportFormat],
        default=ExportFormat.HEX.value,
    )
    p.add_argument("--config", default=None, help="YAML file with palette definitions (tweak flags override its values)")
    p.add_argument("--strict", action="store_true", help="reject malformed hex colors")
    p.add_argument("--log-level", default=None, help="logging level (default from env)")
    return p


def _configs_from_args(args: argparse.Namespace) -> List[PaletteConfig]:
    overrides: Dict[str, Any] = {}
    if args.hue is not None:
        overrides["h"] = args.hue
    if args.saturation is not None:
        overrides["s"] = args.saturation
    if args.l_min is not None:
        overrides["l_min"] = args.l_min
    if args.l_max is not None:
        overrides["l_max"] = args.l_max
    if args.luminance:
        overrides["use_lightness"] = False

    configs: List[PaletteConfig] = []
    if args.config:
        # Tweak flags win over the values in the file.
        configs.extend(replace(cfg, **overrides) for cfg in load_palette_configs(args.config))

    defaults = default_tweaks()
    for i, color in enumerate(args.colors, start=1):
        data = {"value": color, "name": color.lstrip("#").upper(), "id": str(i), **overrides}
        configs.append(PaletteConfig.from_mapping(data, defaults))
    return configs


def _render(palettes: Sequence[Palette], fmt: ExportFormat) -> Dict[str, Any]:
    if fmt == ExportFormat.HEX:
        shaped = shape_output(palettes)
        return {
            name: {stop_label(stop): hex_value for stop, hex_value in stops.items()}
            for name, stops in shaped.items()
        }
    return {pal.name: export_palette(pal, fmt) for pal in palettes}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level)

    if not args.colors and not args.config:
        parser.error("give at least one seed color or --config")

    try:
        configs = _configs_from_args(args)
        palettes = [create_palette(cfg, strict=args.strict or None) for cfg in configs]
    except TonalScaleError as exc:
        print(f"tonalscale: {exc}", file=sys.stderr)
        return 2

    logger.info("generated %d palette(s)", len(palettes))
    json.dump(_render(palettes, ExportFormat.from_value(args.format)), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0
