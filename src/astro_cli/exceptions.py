"""Custom exception hierarchy for astro-cli.

Every failure raised by the config loader or by a dispatched subsystem
should be a subclass of :class:`AstroError` so that the CLI boundary can
render a clean message and an optional hint.  Anything else that escapes
a subsystem is still classified and rendered, just without a hint.

Hierarchy
---------
AstroError
├── ConfigNotFoundError
├── ConfigLoadError
├── ConfigValidationError
├── IntegrationError
├── BuildError
├── ServerError
├── EnvironmentError
└── InternalConsistencyError
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


class AstroError(Exception):
    """Base exception for all astro-cli errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigNotFoundError(AstroError):
    """Raised when an explicitly requested config file does not exist."""


class ConfigLoadError(AstroError):
    """Raised when the config file exists but cannot be read or parsed."""


@dataclass(frozen=True, slots=True)
class ConfigIssue:
    """A single field-level problem found while validating the config."""

    path: tuple[str | int, ...]
    """Location of the offending value, e.g. ``("dev", "port")``."""

    message: str
    """Human-readable description of what is wrong."""

    @property
    def location(self) -> str:
        """Dotted rendering of :attr:`path` (``"integrations[2]"``)."""
        out = ""
        for part in self.path:
            if isinstance(part, int):
                out += f"[{part}]"
            else:
                out += f".{part}" if out else part
        return out or "<root>"


class ConfigValidationError(AstroError):
    """Raised when the config file fails schema validation.

    Carries every issue found, not just the first one, so the user can
    fix the whole file in one pass.
    """

    def __init__(
        self,
        issues: Iterable[ConfigIssue],
        *,
        hint: str | None = None,
    ) -> None:
        self.issues: tuple[ConfigIssue, ...] = tuple(issues)
        count = len(self.issues)
        noun = "issue" if count == 1 else "issues"
        super().__init__(f"Found {count} {noun} in the project config.", hint=hint)


# --- Subsystems ------------------------------------------------------------

class IntegrationError(AstroError):
    """Raised when ``astro add`` cannot add the requested integrations."""


class BuildError(AstroError):
    """Raised when the production build cannot be completed."""


class ServerError(AstroError):
    """Raised when the dev or preview server cannot be started."""


# --- Environment / internal ------------------------------------------------

class EnvironmentError(AstroError):
    """Raised when a required runtime dependency is not available."""


class InternalConsistencyError(AstroError):
    """Raised when the dispatcher meets a command the resolver never emits."""
