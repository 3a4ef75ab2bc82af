"""Core layer: command resolution, config schema, and outcomes.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from astro_cli.core.config import AstroConfig, BuildOptions, DevOptions, validate_config
from astro_cli.core.models import Command, Flags
from astro_cli.core.outcome import (
    ClassifiedError,
    ErrorKind,
    Failure,
    Outcome,
    RunForever,
    Success,
    classify_error,
)
from astro_cli.core.resolver import resolve_command

__all__: list[str] = [
    "AstroConfig",
    "BuildOptions",
    "ClassifiedError",
    "Command",
    "DevOptions",
    "ErrorKind",
    "Failure",
    "Flags",
    "Outcome",
    "RunForever",
    "Success",
    "classify_error",
    "resolve_command",
    "validate_config",
]
