from __future__ import annotations

"""YAML palette definitions.

The packaged ``configs/default.yaml`` supplies default tweak values. A user
file may override them and list named ``palettes``; each entry becomes a
:class:`tonalscale.palette.PaletteConfig`.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .errors import InvalidConfiguration
from .palette import PaletteConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "configs" / "default.yaml"


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_user_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise InvalidConfiguration(f"config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise InvalidConfiguration(f"invalid YAML in {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"{path}: top level must be a mapping")
    return data


def load_config(path: str | Path | None = None) -> Dict[str, Any]:
    """Load the default config, overlaid with ``path`` when given.

    - The packaged default is fail-soft (unreadable -> empty).
    - Top-level keys of the user file replace the default ones, except
      ``defaults`` which is merged key by key.
    """
    base = _safe_load_yaml(DEFAULT_CONFIG_PATH)
    if path is None:
        return base

    user = _load_user_yaml(Path(path))
    merged = dict(base)
    for key, val in user.items():
        if key == "defaults":
            if not isinstance(val, dict):
                raise InvalidConfiguration("'defaults' must be a mapping")
            merged["defaults"] = {**(base.get("defaults") or {}), **val}
        else:
            merged[key] = val
    return merged


def load_palette_configs(path: str | Path | None = None) -> List[PaletteConfig]:
    """Return one validated PaletteConfig per ``palettes`` entry."""
    cfg = load_config(path)
    defaults = cfg.get("defaults") or {}
    entries = cfg.get("palettes") or []
    if not isinstance(entries, list):
        raise InvalidConfiguration("'palettes' must be a list")

    configs: List[PaletteConfig] = []
    for i, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            raise InvalidConfiguration(f"palette entry #{i} must be a mapping")
        data = dict(entry)
        data.setdefault("name", f"palette-{i}")
        data.setdefault("id", str(i))
        configs.append(PaletteConfig.from_mapping(data, defaults).validate())
    logger.debug("loaded %d palette definitions from %s", len(configs), path)
    return configs


def default_tweaks() -> Dict[str, Any]:
    """Default tweak values from the packaged config."""
    return dict(load_config().get("defaults") or {})


__all__ = ["DEFAULT_CONFIG_PATH", "load_config", "load_palette_configs", "default_tweaks"]
