"""Map parsed :class:`Flags` to exactly one :class:`Command`.

Resolution never fails: anything unrecognised falls back to ``help``.
"""

from __future__ import annotations

from astro_cli.core.models import RUN_COMMANDS, Command, Flags


def resolve_command(flags: Flags) -> Command:
    """Determine which command the user requested.

    Precedence, first match wins:

    1. ``add`` as the command token, even alongside ``--version``/``--help``;
    2. ``--version``;
    3. ``--help``;
    4. one of ``dev``, ``build``, ``preview``, ``check``;
    5. ``help``.
    """
    token = flags.command_token
    if token == Command.ADD.value:
        return Command.ADD

    if flags.version:
        return Command.VERSION
    if flags.help:
        return Command.HELP

    if token in RUN_COMMANDS:
        return Command(token)
    return Command.HELP
