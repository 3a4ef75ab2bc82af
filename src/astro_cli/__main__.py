"""``python -m astro_cli``: same behaviour as the ``astro`` script."""

from __future__ import annotations

from astro_cli.cli.app import cli

if __name__ == "__main__":
    cli()
