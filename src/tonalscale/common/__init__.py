"""
Where: `tonalscale.common`.
What: environment parsing, typed settings and logging setup.
Why: keep process-level concerns out of the pure color code.
"""

from .logging import setup_default_logging
from .settings import get, reload_from_env

__all__ = ["get", "reload_from_env", "setup_default_logging"]
