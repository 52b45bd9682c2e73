from __future__ import annotations

"""Data types for palette generation.

:class:`PaletteConfig` is the immutable input of one generation call,
:class:`Swatch` is the output for a single stop and :class:`Palette`
groups a config with its generated swatches.
"""

from dataclasses import asdict, dataclass, field, fields
from numbers import Real
from typing import Any, Dict, List, Mapping

from .errors import InvalidConfiguration
from .stops import is_sentinel

# camelCase keys accepted by PaletteConfig.from_mapping().
_KEY_ALIASES = {
    "lMin": "l_min",
    "lMax": "l_max",
    "useLightness": "use_lightness",
}


@dataclass(frozen=True)
class PaletteConfig:
    """Seed color and tuning parameters.

    Attributes
    ----------
    value:
        Seed hex color, with or without ``#``.
    h:
        Hue spread, in degrees per stop away from the base stop.
    s:
        Saturation spread factor.
    l_min, l_max:
        Bounds of the lightness/luminance distribution (0-100). ``l_max``
        is reached at the lightest end, ``l_min`` at the darkest.
    use_lightness:
        Distribute HSL lightness directly when True; otherwise distribute
        relative luminance and search the matching lightness per stop.
    name, id:
        Identity of the palette. Not used by the algorithm.
    """

    value: str
    h: float = 0
    s: float = 0
    l_min: float = 0
    l_max: float = 100
    use_lightness: bool = True
    name: str = "palette"
    id: str = "1"

    def validate(self) -> "PaletteConfig":
        """Raise :class:`InvalidConfiguration` for unusable parameters."""
        if not isinstance(self.value, str):
            raise InvalidConfiguration(f"value must be a hex string, got {self.value!r}")
        for key in ("h", "s", "l_min", "l_max"):
            v = getattr(self, key)
            if isinstance(v, bool) or not isinstance(v, Real):
                raise InvalidConfiguration(f"{key} must be a number, got {v!r}")
        for key in ("l_min", "l_max"):
            v = getattr(self, key)
            if not (0 <= v <= 100):
                raise InvalidConfiguration(f"{key} must be in [0, 100], got {v}")
        if not isinstance(self.use_lightness, bool):
            raise InvalidConfiguration(
                f"use_lightness must be true or false, got {self.use_lightness!r}"
            )
        if self.l_min > self.l_max:
            raise InvalidConfiguration(
                f"l_min ({self.l_min}) must not exceed l_max ({self.l_max})"
            )
        return self

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        defaults: Mapping[str, Any] | None = None,
    ) -> "PaletteConfig":
        """Build a config from a mapping using snake_case or camelCase keys.

        Unknown keys are rejected. ``defaults`` (same key conventions) fill
        keys missing from ``data``.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for source in (defaults or {}, data):
            for key, val in source.items():
                name = _KEY_ALIASES.get(key, key)
                if name not in known:
                    raise InvalidConfiguration(f"unknown palette key: {key!r}")
                kwargs[name] = val
        if "value" not in kwargs:
            raise InvalidConfiguration("palette entry requires a 'value'")
        if not isinstance(kwargs["value"], str):
            raise InvalidConfiguration(
                f"palette value must be a string, got {kwargs['value']!r}; "
                "quote hex colors in YAML (value: \"001122\")"
            )
        if "id" in kwargs:
            kwargs["id"] = str(kwargs["id"])
        return cls(**kwargs)


@dataclass(frozen=True)
class Swatch:
    """Generated color for one stop, with the values used to derive it."""

    stop: int
    hex: str
    h: float
    h_scale: float
    s: float
    s_scale: float
    l: float

    def as_dict(self) -> Dict[str, Any]:
        """Diagnostic record using the graphing key names."""
        d = asdict(self)
        d["hScale"] = d.pop("h_scale")
        d["sScale"] = d.pop("s_scale")
        return d


@dataclass
class Palette:
    """A config together with its generated swatches (sentinels included)."""

    config: PaletteConfig
    swatches: List[Swatch] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.config.name

    def visible_swatches(self) -> List[Swatch]:
        """Swatches without the sentinel stops."""
        return [sw for sw in self.swatches if not is_sentinel(sw.stop)]


__all__ = ["PaletteConfig", "Swatch", "Palette"]
