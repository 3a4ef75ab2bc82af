"""astro-cli: command-line entry point for Astro projects.

Resolves a single command from the process arguments, loads the project
configuration and dispatches to the matching subsystem.
"""

from astro_cli.version import __version__

__all__: list[str] = ["__version__"]
