"""Tests for command resolution (core/resolver.py).

Coverage:
* ``add`` as the command token beats every flag.
* ``--version`` beats ``--help``.
* Run commands resolve to themselves.
* Anything unrecognised falls back to ``help``.
"""

from __future__ import annotations

from typing import Any

import pytest

from astro_cli.core.models import Command, Flags
from astro_cli.core.resolver import resolve_command


def _flags(*positionals: str, **values: Any) -> Flags:
    return Flags(values=values, positionals=positionals)


# ---------------------------------------------------------------------------
# add precedence
# ---------------------------------------------------------------------------

class TestAddPrecedence:
    @pytest.mark.parametrize(
        "values",
        [
            {},
            {"version": True},
            {"help": True},
            {"version": True, "help": True, "verbose": True},
        ],
    )
    def test_add_wins_over_flags(self, values: dict[str, Any]) -> None:
        assert resolve_command(_flags("add", "react", **values)) is Command.ADD

    def test_add_must_be_the_first_token(self) -> None:
        assert resolve_command(_flags("build", "add")) is Command.BUILD


# ---------------------------------------------------------------------------
# Flag-based commands
# ---------------------------------------------------------------------------

class TestFlagCommands:
    def test_version_flag(self) -> None:
        assert resolve_command(_flags(version=True)) is Command.VERSION

    def test_version_beats_help(self) -> None:
        assert resolve_command(_flags(version=True, help=True)) is Command.VERSION

    def test_version_beats_run_command(self) -> None:
        assert resolve_command(_flags("dev", version=True)) is Command.VERSION

    def test_help_beats_run_command(self) -> None:
        assert resolve_command(_flags("build", help=True)) is Command.HELP

    def test_false_version_is_ignored(self) -> None:
        assert resolve_command(_flags("dev", version=False)) is Command.DEV


# ---------------------------------------------------------------------------
# Run commands and fallback
# ---------------------------------------------------------------------------

class TestRunCommands:
    @pytest.mark.parametrize("token", ["dev", "build", "preview", "check"])
    def test_known_tokens(self, token: str) -> None:
        assert resolve_command(_flags(token)) is Command(token)

    @pytest.mark.parametrize("token", ["reload", "deploy", "DEV", "help", "version", ""])
    def test_unknown_tokens_fall_back_to_help(self, token: str) -> None:
        assert resolve_command(_flags(token)) is Command.HELP

    def test_no_tokens_is_help(self) -> None:
        assert resolve_command(_flags()) is Command.HELP

    def test_reload_is_never_resolved(self) -> None:
        assert resolve_command(_flags("reload", verbose=True)) is not Command.RELOAD
