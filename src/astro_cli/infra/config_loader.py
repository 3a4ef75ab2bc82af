"""Infrastructure: locate, read and validate ``astro.config.toml``.

Rules
-----
* Parsing only; schema rules live in :mod:`astro_cli.core.config`.
* Every read/parse failure is re-raised as an
  :class:`~astro_cli.exceptions.AstroError` subclass.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from astro_cli.core.config import (
    CONFIG_FILENAME,
    AstroConfig,
    apply_flag_overrides,
    validate_config,
)
from astro_cli.core.models import Flags
from astro_cli.exceptions import ConfigLoadError, ConfigNotFoundError


def resolve_config_path(cwd: Path, flags: Flags) -> tuple[Path, bool]:
    """Return ``(path, explicit)`` for the config file to read.

    *explicit* is ``True`` when the path came from ``--config``.
    """
    requested = flags.get("config")
    if isinstance(requested, str) and requested:
        return (cwd / requested).resolve(), True
    return (cwd / CONFIG_FILENAME).resolve(), False


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises
    ------
    ConfigLoadError
        When the file cannot be read or is not valid TOML.
    """
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigLoadError(
            f"Could not parse {path.name}: {exc}",
            hint="Check the file for TOML syntax errors.",
        ) from exc
    except OSError as exc:
        raise ConfigLoadError(f"Could not read {path}: {exc.strerror or exc}") from exc


def load_config(*, cwd: Path, flags: Flags) -> AstroConfig:
    """Load the project config for *cwd*, applying flag overrides.

    A missing default config file is not an error: every option falls
    back to its default.

    Raises
    ------
    ConfigNotFoundError
        When ``--config`` names a file that does not exist.
    ConfigLoadError
        When the file cannot be read or parsed.
    ConfigValidationError
        When the parsed values fail schema validation.
    """
    cwd = Path(cwd).resolve()
    path, explicit = resolve_config_path(cwd, flags)

    if path.is_file():
        raw = read_config_file(path)
        config_file: Path | None = path
    elif explicit:
        raise ConfigNotFoundError(
            f"Config file not found: {path}",
            hint="Pass an existing file to --config, or omit it to use astro.config.toml.",
        )
    else:
        raw = {}
        config_file = None

    merged = apply_flag_overrides(raw, flags)
    return validate_config(merged, cwd=cwd, config_file=config_file)
