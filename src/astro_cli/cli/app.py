"""CLI application entry point for astro.

This module is the **only** place that terminates the process.
:func:`main` parses the arguments and returns the dispatcher's
:class:`~astro_cli.core.outcome.Outcome`; :func:`cli` turns that value
into an exit code, or keeps the process alive for servers.

Architecture notes
------------------
* No business logic lives here; work is delegated to
  :mod:`astro_cli.cli.dispatch` and the subsystems it calls.
* Every failure, including ones that escape the dispatcher, is rendered
  through :func:`~astro_cli.cli.errors.render_error` and exits with
  :data:`~astro_cli.cli.exit_codes.GENERAL_ERROR`.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Sequence
from typing import NoReturn

from astro_cli.cli import exit_codes
from astro_cli.cli.console import console
from astro_cli.cli.dispatch import Subsystems, dispatch
from astro_cli.cli.errors import render_error
from astro_cli.cli.flags import parse_flags
from astro_cli.core.outcome import Failure, Outcome, RunForever, Success, classify_error

_RESIDENT = threading.Event()
"""Never set; servers keep the process resident by waiting on it."""


def main(
    argv: Sequence[str] | None = None,
    *,
    subsystems: Subsystems | None = None,
) -> Outcome:
    """Run the astro CLI and return the outcome without exiting.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    subsystems:
        Collaborators to dispatch to; the real ones by default.
    """
    flags = parse_flags(sys.argv[1:] if argv is None else argv)
    return dispatch(flags, subsystems)


def wait_forever() -> NoReturn:
    """Block until the process is interrupted."""
    while True:
        # Short waits keep Ctrl+C responsive on every platform.
        _RESIDENT.wait(1.0)


def exit_code_for(outcome: Success | Failure) -> int:
    """Render a failure if there is one and return the exit code."""
    if isinstance(outcome, Failure):
        render_error(outcome.error)
    return outcome.exit_code


# ---------------------------------------------------------------------------
# Script-level termination boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level boundary invoked by the console-script entry point."""
    try:
        outcome = main()
        if isinstance(outcome, RunForever):
            wait_forever()
        sys.exit(exit_code_for(outcome))
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        render_error(classify_error(exc))
        sys.exit(exit_codes.GENERAL_ERROR)
