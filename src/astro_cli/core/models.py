"""Domain models for astro-cli.

Immutable value objects with no behaviour beyond data access.  They
carry zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

FlagValue = str | bool | None


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class Command(str, Enum):
    """Every action a single invocation can resolve to."""

    HELP = "help"
    VERSION = "version"
    ADD = "add"
    DEV = "dev"
    BUILD = "build"
    PREVIEW = "preview"
    RELOAD = "reload"
    CHECK = "check"


RUN_COMMANDS: frozenset[str] = frozenset({"dev", "build", "preview", "check"})
"""Positional command tokens that resolve to themselves."""


# ---------------------------------------------------------------------------
# Parsed flags
# ---------------------------------------------------------------------------

def _freeze(values: Mapping[str, FlagValue]) -> Mapping[str, FlagValue]:
    return MappingProxyType(dict(values))


@dataclass(frozen=True, slots=True)
class Flags:
    """Flags and positionals of one invocation, read-only after parsing.

    Flag names are stored in ``snake_case`` (``--project-root`` becomes
    ``project_root``).  The first positional is the command token; the
    program name is never included.
    """

    values: Mapping[str, FlagValue] = field(default_factory=dict)
    positionals: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", _freeze(self.values))
        object.__setattr__(self, "positionals", tuple(self.positionals))

    def get(self, name: str, default: FlagValue = None) -> FlagValue:
        return self.values.get(name, default)

    def is_set(self, name: str) -> bool:
        """Return ``True`` when *name* is present with a truthy value."""
        return bool(self.values.get(name))

    @property
    def command_token(self) -> str | None:
        return self.positionals[0] if self.positionals else None

    @property
    def command_args(self) -> tuple[str, ...]:
        """Positional tokens after the command token."""
        return self.positionals[1:]

    @property
    def help(self) -> bool:
        return self.is_set("help")

    @property
    def version(self) -> bool:
        return self.is_set("version")

    @property
    def verbose(self) -> bool:
        return self.is_set("verbose")

    @property
    def silent(self) -> bool:
        return self.is_set("silent")

    @property
    def project_root(self) -> str | None:
        value = self.values.get("project_root")
        return value if isinstance(value, str) else None
