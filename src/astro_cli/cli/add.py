"""``astro add``: register integrations in the project config.

Flow:

1. Validate the requested integration names.
2. Read the current ``integrations`` array from the config file.
3. Show the planned change and ask for confirmation (skipped with
   ``--yes``).
4. Write the updated array back.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from astro_cli import logger
from astro_cli.core.models import Flags
from astro_cli.exceptions import EnvironmentError, IntegrationError
from astro_cli.infra.config_loader import read_config_file, resolve_config_path
from astro_cli.infra.config_writer import render_integrations, write_integrations
from astro_cli.logger import LoggingOptions

_NAME = re.compile(r"^(@[a-z0-9][a-z0-9._-]*/)?[a-z0-9][a-z0-9._-]*$")


def _import_questionary() -> Any:
    """Import questionary lazily for the confirmation prompt."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
            hint="Or pass --yes to skip the confirmation prompt.",
        ) from exc
    return questionary


def confirm_change(message: str) -> bool:
    """Ask a yes/no question.

    Raises
    ------
    IntegrationError
        If the user cancels the prompt (Ctrl+C / Esc).
    """
    questionary = _import_questionary()
    answer: bool | None = questionary.confirm(message, default=True).ask()
    if answer is None:
        raise IntegrationError("Add cancelled.", hint="No changes were made.")
    return answer


def _current_integrations(path: Path) -> list[str]:
    if not path.is_file():
        return []
    current = read_config_file(path).get("integrations", [])
    if not isinstance(current, list) or not all(isinstance(n, str) for n in current):
        raise IntegrationError(
            f"`integrations` in {path.name} is not an array of strings.",
            hint="Fix the config file, then run astro add again.",
        )
    return current


def add_integrations(
    names: Sequence[str],
    *,
    cwd: Path,
    flags: Flags,
    logging: LoggingOptions,
) -> None:
    """Add *names* to the ``integrations`` array of the project config."""
    if not names:
        raise IntegrationError(
            "No integrations specified.",
            hint="Usage: astro add <integration> [...integrations]",
        )
    invalid = [name for name in names if not _NAME.match(name)]
    if invalid:
        raise IntegrationError(
            f"Invalid integration name(s): {', '.join(invalid)}",
            hint="Names may contain lowercase letters, digits, '.', '_' and '-', "
            "optionally scoped as @scope/name.",
        )

    path, _ = resolve_config_path(Path(cwd).resolve(), flags)
    current = _current_integrations(path)
    new = [name for name in dict.fromkeys(names) if name not in current]
    if not new:
        logger.info(logging, "add", "All requested integrations are already configured.")
        return

    updated = [*current, *new]
    logger.info(logging, "add", f"Astro will update {path.name}:")
    logger.info(logging, None, f"  + {render_integrations(updated)}")

    if not flags.is_set("yes") and not confirm_change("Continue?"):
        logger.info(logging, "add", "No changes were made.")
        return

    write_integrations(path, updated)
    logger.debug(logging, "add", f"wrote {path}")
    logger.info(logging, "add", f"Added {', '.join(new)} to {path.name}")
