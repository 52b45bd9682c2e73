from __future__ import annotations

from pathlib import Path

import pytest

from tonalscale.config import default_tweaks, load_config, load_palette_configs
from tonalscale.errors import InvalidConfiguration
from tonalscale.palette import PaletteConfig
from tonalscale.stops import BASE_STOP
from tonalscale.swatches import generate_palette


def _write(tmp_path: Path, text: str) -> Path:
    p = tmp_path / "palettes.yaml"
    p.write_text(text, encoding="utf-8")
    return p


def test_default_tweaks_from_packaged_config() -> None:
    assert default_tweaks() == {"h": 0, "s": 0, "lMin": 0, "lMax": 100, "useLightness": True}


def test_load_config_without_path_has_no_palettes() -> None:
    cfg = load_config()
    assert cfg["palettes"] == []


def test_load_palette_configs(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
defaults:
  lMin: 5
palettes:
  - name: brand
    value: "22C55E"
    h: 2
  - value: "#3B82F6"
    useLightness: false
""",
    )
    configs = load_palette_configs(path)
    assert configs[0] == PaletteConfig(value="22C55E", h=2, l_min=5, name="brand", id="1")
    assert configs[1].name == "palette-2"
    assert configs[1].use_lightness is False
    assert configs[1].l_min == 5
    assert configs[1].l_max == 100


@pytest.mark.parametrize("seed", ["001122", "000000", "123456"])
def test_unquoted_numeric_seed_is_rejected(tmp_path: Path, seed: str) -> None:
    """YAML reads these as ints (001122 even as octal), so the hex would be lost."""
    path = _write(tmp_path, f"palettes:\n  - name: navy\n    value: {seed}\n")
    with pytest.raises(InvalidConfiguration, match="quote"):
        load_palette_configs(path)


def test_quoted_numeric_seed_keeps_its_digits(tmp_path: Path) -> None:
    path = _write(tmp_path, "palettes:\n  - name: navy\n    value: '001122'\n")
    cfg = load_palette_configs(path)[0]
    assert cfg.value == "001122"
    base = [sw for sw in generate_palette(cfg) if sw.stop == BASE_STOP][0]
    assert base.hex == "#001122"


def test_missing_user_file(tmp_path: Path) -> None:
    with pytest.raises(InvalidConfiguration):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "palettes: {a: 1}\n",
        "palettes:\n  - 42\n",
        "palettes:\n  - name: x\n",
        "palettes:\n  - value: '22C55E'\n    colour: red\n",
        "palettes:\n  - value: '22C55E'\n    lMin: 90\n    lMax: 10\n",
        "- just\n- a list\n",
        "defaults: 3\n",
        "palettes: [\n",
        "palettes:\n  - value: '22C55E'\n    useLightness: 'false'\n",
    ],
)
def test_invalid_files(tmp_path: Path, text: str) -> None:
    with pytest.raises(InvalidConfiguration):
        load_palette_configs(_write(tmp_path, text))


def test_empty_user_file(tmp_path: Path) -> None:
    assert load_palette_configs(_write(tmp_path, "")) == []


def test_from_mapping_accepts_both_key_styles() -> None:
    a = PaletteConfig.from_mapping({"value": "abc", "lMin": 10, "useLightness": False})
    b = PaletteConfig.from_mapping({"value": "abc", "l_min": 10, "use_lightness": False})
    assert a == b
