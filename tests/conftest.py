"""Shared pytest fixtures and configuration for the astro-cli test suite.

Guidelines
----------
* No internet access in any test; servers bind to localhost on port 0.
* Subsystems are faked at the dispatcher boundary unless the test is
  about the subsystem itself.
* Process-wide logging state is reset around every test.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from astro_cli import logger
from astro_cli.logger import LoggingOptions, LogLevel, LogMessage


class RecordingDestination:
    """Log destination that keeps every message for assertions."""

    def __init__(self) -> None:
        self.messages: list[LogMessage] = []

    def write(self, message: LogMessage) -> None:
        self.messages.append(message)

    @property
    def texts(self) -> list[str]:
        return [m.text for m in self.messages]


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    logger.reset_logging()
    yield
    logger.reset_logging()


@pytest.fixture()
def destination() -> RecordingDestination:
    return RecordingDestination()


@pytest.fixture()
def logging_options(destination: RecordingDestination) -> LoggingOptions:
    return LoggingOptions(destination=destination, level=LogLevel.INFO)


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    """A minimal project: two pages, one draft, one public asset."""
    pages = tmp_path / "src" / "pages"
    (pages / "blog").mkdir(parents=True)
    (pages / "index.html").write_text("<h1>Home</h1>\n", encoding="utf-8")
    (pages / "blog" / "first.md").write_text(
        "---\ntitle: First\n---\n# First post\n", encoding="utf-8",
    )
    (pages / "blog" / "wip.md").write_text(
        "---\ntitle: WIP\ndraft: true\n---\n# Not yet\n", encoding="utf-8",
    )
    public = tmp_path / "public"
    public.mkdir()
    (public / "robots.txt").write_text("User-agent: *\n", encoding="utf-8")
    return tmp_path
