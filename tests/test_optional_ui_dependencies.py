"""Regression tests for optional CLI UI dependencies (rich/questionary).

These tests verify bootstrap commands are resilient when optional UI
packages are missing, and ``add`` fails cleanly only when its prompt is
actually needed.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from astro_cli.cli import exit_codes
from astro_cli.cli.app import exit_code_for, main
from astro_cli.core.outcome import Failure, Success
from astro_cli.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)
    monkeypatch.setitem(sys.modules, "rich.text", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def _write_site(root: Path) -> None:
    pages = root / "src" / "pages"
    pages.mkdir(parents=True)
    (pages / "index.html").write_text("<p>hi</p>\n", encoding="utf-8")


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    assert main(["--help"]) == Success(exit_codes.SUCCESS)


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    assert main(["--version"]) == Success(exit_codes.SUCCESS)


def test_build_works_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    _write_site(tmp_path)

    assert main(["build", "--project-root", str(tmp_path)]) == Success(exit_codes.SUCCESS)
    assert (tmp_path / "dist" / "index.html").exists()
    assert "[build] 1 page(s) built" in capsys.readouterr().err


def test_config_errors_render_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    (tmp_path / "astro.config.toml").write_text("[dev]\nport = 0\n", encoding="utf-8")

    outcome = main(["build", "--project-root", str(tmp_path)])
    assert isinstance(outcome, Failure)
    assert exit_code_for(outcome) == exit_codes.GENERAL_ERROR
    err = capsys.readouterr().err
    assert "[config] Astro found issue with your configuration:" in err
    assert "dev.port" in err


def test_add_with_yes_works_without_questionary(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
) -> None:
    _hide_questionary(monkeypatch)

    outcome = main(["add", "react", "--yes", "--project-root", str(tmp_path)])
    assert outcome == Success(exit_codes.SUCCESS)
    assert "react" in (tmp_path / "astro.config.toml").read_text(encoding="utf-8")


def test_add_prompt_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
) -> None:
    _hide_questionary(monkeypatch)

    outcome = main(["add", "react", "--project-root", str(tmp_path)])
    assert isinstance(outcome, Failure)
    assert isinstance(outcome.error.exception, EnvironmentError)
    assert "questionary is not installed" in outcome.error.message
    assert not (tmp_path / "astro.config.toml").exists()
