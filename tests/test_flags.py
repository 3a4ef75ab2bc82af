"""Tests for flag parsing (cli/flags.py) and the :class:`Flags` model."""

from __future__ import annotations

import pytest

from astro_cli.cli.flags import parse_flags
from astro_cli.core.models import Flags


class TestParseFlags:
    def test_empty(self) -> None:
        flags = parse_flags([])
        assert flags.positionals == ()
        assert dict(flags.values) == {}

    def test_command_and_args(self) -> None:
        flags = parse_flags(["add", "react", "tailwind"])
        assert flags.command_token == "add"
        assert flags.command_args == ("react", "tailwind")

    def test_flags_interleaved_with_positionals(self) -> None:
        flags = parse_flags(["add", "--yes", "react", "--verbose", "vue"])
        assert flags.positionals == ("add", "react", "vue")
        assert flags.is_set("yes")
        assert flags.verbose

    def test_absent_flags_are_not_recorded(self) -> None:
        flags = parse_flags(["build"])
        assert "verbose" not in flags.values
        assert "help" not in flags.values

    def test_project_root_is_snake_cased(self) -> None:
        flags = parse_flags(["dev", "--project-root", "site"])
        assert flags.project_root == "site"

    @pytest.mark.parametrize("argv", [["-h"], ["--help"]])
    def test_help(self, argv: list[str]) -> None:
        assert parse_flags(argv).help

    @pytest.mark.parametrize("argv", [["-V"], ["--version"]])
    def test_version(self, argv: list[str]) -> None:
        assert parse_flags(argv).version

    def test_bare_host_is_true(self) -> None:
        assert parse_flags(["dev", "--host"]).get("host") is True

    def test_host_with_address(self) -> None:
        assert parse_flags(["dev", "--host", "0.0.0.0"]).get("host") == "0.0.0.0"

    def test_no_sitemap(self) -> None:
        assert parse_flags(["build", "--no-sitemap"]).get("sitemap") is False

    def test_unknown_flags_are_kept(self) -> None:
        flags = parse_flags(["build", "--experimental-ssr", "--mode=static", "--no-color"])
        assert flags.get("experimental_ssr") is True
        assert flags.get("mode") == "static"
        assert flags.get("color") is False

    def test_missing_option_value_does_not_raise(self) -> None:
        flags = parse_flags(["dev", "--port"])
        assert flags.command_token == "dev"
        assert flags.get("port") is True

    def test_malformed_option_keeps_other_values(self) -> None:
        flags = parse_flags(["build", "--project-root", "/srv/site", "--port"])
        assert flags.positionals == ("build",)
        assert flags.project_root == "/srv/site"
        assert flags.get("port") is True

    def test_malformed_option_keeps_equals_values(self) -> None:
        flags = parse_flags(["dev", "--config=custom.toml", "--host", "0.0.0.0", "--site"])
        assert flags.positionals == ("dev",)
        assert flags.get("config") == "custom.toml"
        assert flags.get("host") == "0.0.0.0"
        assert flags.get("site") is True


class TestFlagsModel:
    def test_values_are_read_only(self) -> None:
        flags = Flags(values={"verbose": True})
        with pytest.raises(TypeError):
            flags.values["verbose"] = False  # type: ignore[index]

    def test_source_mapping_is_copied(self) -> None:
        source = {"silent": True}
        flags = Flags(values=source)
        source["silent"] = False
        assert flags.silent

    def test_non_string_project_root_is_ignored(self) -> None:
        assert Flags(values={"project_root": True}).project_root is None
