"""Protocols (interfaces) for the collaborators the dispatcher calls.

The dispatcher depends ONLY on these call shapes, never on concrete
implementations, so tests can hand it plain fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from astro_cli.core.config import AstroConfig
from astro_cli.core.models import Flags

if TYPE_CHECKING:
    from astro_cli.logger import LoggingOptions


class ConfigLoader(Protocol):
    def __call__(self, *, cwd: Path, flags: Flags) -> AstroConfig:
        """Load and validate the project config.

        Raises
        ------
        ConfigValidationError
            When the file parses but fails schema validation.
        AstroError
            Any other loading failure.
        """
        ...  # pragma: no cover


class AddCommand(Protocol):
    def __call__(
        self,
        names: Sequence[str],
        *,
        cwd: Path,
        flags: Flags,
        logging: LoggingOptions,
    ) -> None:
        """Add the integrations *names* to the project at *cwd*."""
        ...  # pragma: no cover


class ConfigCommand(Protocol):
    def __call__(self, config: AstroConfig, *, logging: LoggingOptions) -> None:
        """Run ``dev``, ``build`` or ``preview`` for *config*.

        ``dev`` and ``preview`` return once their server is listening;
        the server keeps running in the background.
        """
        ...  # pragma: no cover


class CheckCommand(Protocol):
    def __call__(self, config: AstroConfig) -> int:
        """Check the project and return the process exit code to use."""
        ...  # pragma: no cover
