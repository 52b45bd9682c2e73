from __future__ import annotations

import numpy as np
import pytest

from tonalscale.convert import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    hsl_to_rgb_array,
    luminance_from_hex,
    luminance_from_rgb,
    luminance_from_rgb_array,
    normalize_hex,
    round_half_up,
)
from tonalscale.errors import InvalidColorFormat


@pytest.mark.parametrize("value", ["#22C55E", "22C55E", "#22c55e", "22c55e", " #22C55E "])
def test_hex_to_rgb_accepts_marker_and_case(value: str) -> None:
    assert hex_to_rgb(value) == (34, 197, 94)


@pytest.mark.parametrize("value", ["#abc", "abc", "#ABC"])
def test_hex_to_rgb_short_form_duplicates_nibbles(value: str) -> None:
    assert hex_to_rgb(value) == (170, 187, 204)


@pytest.mark.parametrize("value", ["", "#", "#12345", "1234", "#1234567"])
def test_hex_to_rgb_bad_length_is_black(value: str) -> None:
    assert hex_to_rgb(value) == (0, 0, 0)


def test_hex_to_rgb_bad_digits_zero_only_that_channel() -> None:
    assert hex_to_rgb("#GG10FF") == (0, 16, 255)


@pytest.mark.parametrize("value", ["#12345", "1234", "#GGGGGG", "xyz", ""])
def test_hex_to_rgb_strict_raises(value: str) -> None:
    with pytest.raises(InvalidColorFormat):
        hex_to_rgb(value, strict=True)


def test_invalid_color_format_is_value_error() -> None:
    with pytest.raises(ValueError):
        hex_to_hsl("#12", strict=True)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("#22C55E", (142.0, 70.6, 45.3)),
        ("#000000", (0.0, 0.0, 0.0)),
        ("#FFFFFF", (0.0, 0.0, 100.0)),
        ("#FF0000", (0.0, 100.0, 50.0)),
        ("#00FF00", (120.0, 100.0, 50.0)),
        ("#0000FF", (240.0, 100.0, 50.0)),
        ("#FF00FF", (300.0, 100.0, 50.0)),
        ("#808080", (0.0, 0.0, 50.2)),
    ],
)
def test_hex_to_hsl(value: str, expected: tuple[float, float, float]) -> None:
    assert hex_to_hsl(value) == expected


def test_hex_to_hsl_hue_in_range() -> None:
    for value in ("#FF0001", "#FF00FE", "#F0F", "#123456", "#FEDCBA"):
        h, _, _ = hex_to_hsl(value)
        assert 0 <= h < 360


def test_hsl_to_rgb_primaries() -> None:
    assert hsl_to_rgb(0, 100, 50) == (255, 0, 0)
    assert hsl_to_rgb(120, 100, 50) == (0, 255, 0)
    assert hsl_to_rgb(240, 100, 50) == (0, 0, 255)
    assert hsl_to_rgb(0, 0, 100) == (255, 255, 255)
    assert hsl_to_rgb(0, 0, 0) == (0, 0, 0)


def test_hsl_to_rgb_hue_360_has_no_sector() -> None:
    # Only the lightness match remains: m = 0.5 - 0.5 = 0
    assert hsl_to_rgb(360, 100, 50) == (0, 0, 0)


def test_hsl_to_hex_lowercase_padded() -> None:
    assert hsl_to_hex(142, 70.6, 95) == "#e9fbf0"
    assert hsl_to_hex(0, 0, 0) == "#000000"
    assert hsl_to_hex(240, 100, 50) == "#0000ff"


def test_round_trip_reference_seed_is_exact() -> None:
    assert hsl_to_hex(*hex_to_hsl("#22C55E")) == "#22c55e"


@pytest.mark.parametrize("value", ["#22C55E", "#3B82F6", "#EF4444", "#808080", "#FFFFFF", "#000000"])
def test_round_trip_within_one(value: str) -> None:
    back = hex_to_rgb(hsl_to_hex(*hex_to_hsl(value)))
    for a, b in zip(hex_to_rgb(value), back):
        assert abs(a - b) <= 1


def test_luminance_bounds() -> None:
    assert luminance_from_rgb(0, 0, 0) == 0
    assert luminance_from_rgb(255, 255, 255) == pytest.approx(100.0)
    assert luminance_from_rgb(255, 0, 0) == pytest.approx(21.26)
    assert luminance_from_hex("#FFFFFF") == 100.0
    assert luminance_from_hex("000") == 0.0


def test_luminance_from_hex_two_decimals() -> None:
    lum = luminance_from_hex("#22C55E")
    assert lum == round_half_up(luminance_from_rgb(34, 197, 94), 2)
    assert 0 < lum < 100


def test_round_half_up_ties() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(94.53) == 95


def test_normalize_hex() -> None:
    assert normalize_hex("22c55e") == "#22C55E"
    assert normalize_hex("#abc") == "#AABBCC"
    assert normalize_hex("#12345") == "#12345"
    with pytest.raises(InvalidColorFormat):
        normalize_hex("#12345", strict=True)


@pytest.mark.parametrize("h,s", [(0, 0), (142, 70.6), (59.5, 100), (200, 35.2), (359, 80), (360, 50)])
def test_array_variants_match_scalar(h: float, s: float) -> None:
    lightness = np.arange(100, dtype=np.float64)
    rgb = hsl_to_rgb_array(h, s, lightness)
    expected = np.array([hsl_to_rgb(h, s, float(l)) for l in lightness], dtype=np.float64)
    np.testing.assert_array_equal(rgb, expected)

    lum = luminance_from_rgb_array(rgb)
    expected_lum = np.array([luminance_from_rgb(*row) for row in expected])
    np.testing.assert_allclose(lum, expected_lum, rtol=1e-12, atol=1e-12)
