"""Project configuration schema and validation.

Pure transforms only: the raw mapping comes from the config loader in
``infra``.  The file schema is a set of pydantic models; every problem
pydantic reports is collected into one
:class:`~astro_cli.exceptions.ConfigValidationError`, and the result is a
frozen :class:`AstroConfig` with paths resolved against the project root.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
)

from astro_cli.core.models import Flags
from astro_cli.exceptions import ConfigIssue, ConfigValidationError

CONFIG_FILENAME: str = "astro.config.toml"

DEFAULT_HOSTNAME: str = "localhost"
DEFAULT_PORT: int = 3000

PathString = Annotated[StrictStr, Field(min_length=1)]
"""A non-empty path, relative to the project root."""


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

class BuildOptions(BaseModel):
    """The ``[build]`` table."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    site: AnyHttpUrl | None = None
    sitemap: StrictBool = True
    drafts: StrictBool = False


class DevOptions(BaseModel):
    """The ``[dev]`` table, shared by the dev and preview servers."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    hostname: StrictStr = Field(default=DEFAULT_HOSTNAME, min_length=1)
    port: StrictInt = Field(default=DEFAULT_PORT, ge=1, le=65535)


class UserConfig(BaseModel):
    """``astro.config.toml`` as written, before paths are resolved."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_root: PathString = "."
    src: PathString = "./src"
    pages: PathString = "./src/pages"
    public: PathString = "./public"
    dist: PathString = "./dist"
    integrations: tuple[Annotated[StrictStr, Field(min_length=1)], ...] = ()
    build: BuildOptions = Field(default_factory=BuildOptions)
    dev: DevOptions = Field(default_factory=DevOptions)


class AstroConfig(BaseModel):
    """Validated project configuration.  All paths are absolute."""

    model_config = ConfigDict(frozen=True)

    project_root: Path
    src: Path
    pages: Path
    public: Path
    dist: Path
    integrations: tuple[str, ...] = ()
    build: BuildOptions = Field(default_factory=BuildOptions)
    dev: DevOptions = Field(default_factory=DevOptions)
    config_file: Path | None = None
    """The file the config was read from, ``None`` when defaults were used."""


# ---------------------------------------------------------------------------
# Flag overrides
# ---------------------------------------------------------------------------

def apply_flag_overrides(raw: Mapping[str, Any], flags: Flags) -> dict[str, Any]:
    """Merge CLI flags that shadow config values into a copy of *raw*."""
    merged: dict[str, Any] = dict(raw)

    # Non-table values are left alone so validation reports them.
    build_raw = merged.get("build", {})
    if isinstance(build_raw, Mapping):
        build = dict(build_raw)
        site = flags.get("site")
        if isinstance(site, str):
            build["site"] = site
        if flags.get("sitemap") is False:
            build["sitemap"] = False
        if flags.is_set("drafts"):
            build["drafts"] = True
        if build:
            merged["build"] = build

    dev_raw = merged.get("dev", {})
    if isinstance(dev_raw, Mapping):
        dev = dict(dev_raw)
        host = flags.get("host")
        if host is True:
            dev["hostname"] = "0.0.0.0"
        elif isinstance(host, str):
            dev["hostname"] = host
        port = flags.get("port")
        if isinstance(port, str):
            dev["port"] = int(port) if port.isascii() and port.isdigit() else port
        if dev:
            merged["dev"] = dev

    return merged


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

_MESSAGES: dict[str, str] = {
    "extra_forbidden": "Unrecognized key",
}


def issues_from_validation_error(exc: ValidationError) -> tuple[ConfigIssue, ...]:
    """One :class:`ConfigIssue` per error pydantic reported."""
    return tuple(
        ConfigIssue(tuple(err["loc"]), _MESSAGES.get(err["type"], err["msg"]))
        for err in exc.errors()
    )


def validate_config(
    raw: Mapping[str, Any],
    *,
    cwd: Path,
    config_file: Path | None = None,
) -> AstroConfig:
    """Validate *raw* and return an :class:`AstroConfig`.

    Raises
    ------
    ConfigValidationError
        Listing every invalid field found.
    """
    try:
        user = UserConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(
            issues_from_validation_error(exc),
            hint=f"See {config_file or CONFIG_FILENAME} for the offending values.",
        ) from exc

    root = (cwd / user.project_root).resolve()
    return AstroConfig(
        project_root=root,
        src=(root / user.src).resolve(),
        pages=(root / user.pages).resolve(),
        public=(root / user.public).resolve(),
        dist=(root / user.dist).resolve(),
        integrations=user.integrations,
        build=user.build,
        dev=user.dev,
        config_file=config_file,
    )
