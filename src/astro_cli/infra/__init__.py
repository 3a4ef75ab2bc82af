"""Infrastructure layer: filesystem, TOML and HTTP integration.

Every raw exception from the standard library (``OSError``,
``tomllib.TOMLDecodeError``) is caught here and re-raised as an
:class:`~astro_cli.exceptions.AstroError` subclass.

Rules
-----
* No imports from ``cli``.
* No ``print()``; progress goes through :mod:`astro_cli.logger`.
"""

from astro_cli.infra.build import build
from astro_cli.infra.check import check
from astro_cli.infra.config_loader import load_config
from astro_cli.infra.dev import dev_server
from astro_cli.infra.preview import preview

__all__: list[str] = [
    "build",
    "check",
    "dev_server",
    "load_config",
    "preview",
]
