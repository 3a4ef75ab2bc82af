"""Command dispatch: one resolved command, at most one subsystem call.

:func:`dispatch` is the state machine behind ``astro``.  It never exits
the process; every path ends in an :class:`~astro_cli.core.outcome.Outcome`
that the CLI boundary in :mod:`astro_cli.cli.app` acts on:

* ``help`` / ``version``: print, then ``Success(0)``.  No config load.
* ``add`` / ``build``: ``Success(0)`` once the subsystem returns.
* ``dev`` / ``preview``: ``RunForever`` once the server is listening.
* ``check``: ``Success`` carrying the exit code the check pass chose.
* any failure from config loading or a subsystem: ``Failure(1, ...)``.

``check`` is the exception to the last rule: it reports its own
problems through its return value.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from astro_cli import logger
from astro_cli.cli import exit_codes
from astro_cli.cli.messages import print_help, print_version
from astro_cli.core.config import AstroConfig
from astro_cli.core.models import Command, Flags
from astro_cli.core.outcome import Failure, Outcome, RunForever, Success
from astro_cli.core.protocols import AddCommand, CheckCommand, ConfigCommand, ConfigLoader
from astro_cli.core.resolver import resolve_command
from astro_cli.exceptions import InternalConsistencyError
from astro_cli.logger import LoggingOptions, configure_logging


@dataclass(frozen=True, slots=True)
class Subsystems:
    """The collaborators a dispatch may call."""

    load_config: ConfigLoader
    add: AddCommand
    dev: ConfigCommand
    build: ConfigCommand
    preview: ConfigCommand
    check: CheckCommand


def default_subsystems() -> Subsystems:
    """Wire the real subsystem implementations.

    Imported lazily so ``--help`` and ``--version`` never pay for them.
    """
    from astro_cli.cli.add import add_integrations
    from astro_cli.infra.build import build
    from astro_cli.infra.check import check
    from astro_cli.infra.config_loader import load_config
    from astro_cli.infra.dev import dev_server
    from astro_cli.infra.preview import preview

    return Subsystems(
        load_config=load_config,
        add=add_integrations,
        dev=dev_server,
        build=build,
        preview=preview,
        check=check,
    )


def project_root(flags: Flags) -> Path:
    """Working directory for config resolution and ``add``."""
    return Path(flags.project_root) if flags.project_root else Path.cwd()


def _attempt(action: Callable[[], object], on_success: Outcome) -> Outcome:
    try:
        action()
    except Exception as exc:  # noqa: BLE001
        return Failure.from_exception(exc, exit_codes.GENERAL_ERROR)
    return on_success


def _run_command(
    command: Command,
    flags: Flags,
    config: AstroConfig,
    cwd: Path,
    logging: LoggingOptions,
    subsystems: Subsystems,
) -> Outcome:
    if command is Command.ADD:
        return _attempt(
            lambda: subsystems.add(flags.command_args, cwd=cwd, flags=flags, logging=logging),
            Success(exit_codes.SUCCESS),
        )

    if command is Command.DEV:
        # The server keeps running after dev() returns.
        return _attempt(lambda: subsystems.dev(config, logging=logging), RunForever())

    if command is Command.BUILD:
        return _attempt(
            lambda: subsystems.build(config, logging=logging),
            Success(exit_codes.SUCCESS),
        )

    if command is Command.PREVIEW:
        return _attempt(lambda: subsystems.preview(config, logging=logging), RunForever())

    if command is Command.CHECK:
        return Success(int(subsystems.check(config)))

    return Failure.from_exception(
        InternalConsistencyError(f"Error running {command.value}"),
        exit_codes.GENERAL_ERROR,
    )


def dispatch(flags: Flags, subsystems: Subsystems | None = None) -> Outcome:
    """Resolve the command in *flags* and run it."""
    command = resolve_command(flags)

    if command is Command.HELP:
        print_help()
        return Success(exit_codes.SUCCESS)
    if command is Command.VERSION:
        print_version()
        return Success(exit_codes.SUCCESS)

    logging = configure_logging(flags)
    logger.debug(logging, "cli", f"resolved command: {command.value}")
    subsystems = subsystems or default_subsystems()
    cwd = project_root(flags)

    try:
        config = subsystems.load_config(cwd=cwd, flags=flags)
    except Exception as exc:  # noqa: BLE001
        return Failure.from_exception(exc, exit_codes.GENERAL_ERROR)
    logger.debug(logging, "config", f"loaded from {config.config_file or 'defaults'}")

    return _run_command(command, flags, config, cwd, logging, subsystems)
