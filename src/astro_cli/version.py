"""Single source of truth for the astro-cli package version."""

from __future__ import annotations

__version__: str = "0.24.0"
