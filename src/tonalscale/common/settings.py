"""
Where: `tonalscale.common.settings`
What: typed snapshot of the TONALSCALE_* environment variables.
Why: one place for defaults and types, and easy overrides in tests.
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_str


@dataclass
class _Settings:
    # Logging level used by setup_default_logging() from the CLI
    LOG_LEVEL: str = "WARNING"

    # Reject malformed seed colors instead of degrading to black
    STRICT_HEX: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """Re-read settings from the environment."""
    _settings.LOG_LEVEL = (env_str("TONALSCALE_LOG_LEVEL", "WARNING") or "WARNING").upper()
    _settings.STRICT_HEX = env_bool("TONALSCALE_STRICT_HEX", False)


def get() -> _Settings:
    """Return the current settings snapshot."""
    return _settings


reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
