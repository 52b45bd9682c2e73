"""
Where: `tonalscale.common.env`
What: small parsing helpers for environment variables.
Why: avoid scattering `os.getenv` plus fallback handling across modules.
"""

from __future__ import annotations

import os
from typing import Optional


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """Return a stripped string variable, or ``default`` when unset/empty."""
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip()
    return raw or default


def env_bool(name: str, default: bool = False) -> bool:
    """Boolean variable (accepts 0/1, true/false, yes/no, on/off)."""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    try:
        # numbers first
        return int(raw) != 0
    except ValueError:
        s = raw.strip().lower()
        if s in {"true", "t", "yes", "y", "on"}:
            return True
        if s in {"false", "f", "no", "n", "off"}:
            return False
        return bool(default)
