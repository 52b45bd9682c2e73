"""Shared fixtures.

- reference palette for #22C55E with default tweaks
- settings reset around environment-dependent tests
"""

from __future__ import annotations

from typing import Dict, Iterator

import pytest

from tonalscale.common import settings

REFERENCE_SEED = "#22C55E"

REFERENCE_PALETTE: Dict[str, str] = {
    "c50": "#E9FBF0",
    "c100": "#CFF7DE",
    "c200": "#9FEFBC",
    "c300": "#6FE69B",
    "c400": "#40DE7A",
    "c500": "#22C55E",
    "c600": "#1B9D4B",
    "c700": "#147538",
    "c800": "#0D4E25",
    "c900": "#072713",
}


@pytest.fixture()
def reference_palette() -> Dict[str, str]:
    return dict(REFERENCE_PALETTE)


@pytest.fixture()
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("TONALSCALE_STRICT_HEX", raising=False)
    monkeypatch.delenv("TONALSCALE_LOG_LEVEL", raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()
