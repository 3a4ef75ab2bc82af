"""Levelled, Rich-rendered logging shared by every layer.

Output goes to stderr through Rich when it is installed and through a
plain ``print`` otherwise, so a missing UI dependency never hides a
message.

Verbose mode
------------
:func:`enable_verbose_logging` flips a process-wide flag that unlocks
``debug`` messages for every later logging call, not just for the
:class:`LoggingOptions` value that requested it.  It is set at most once
per process (by :func:`configure_logging`) and never reset outside the
test suite.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Protocol

from astro_cli.core.models import Flags


class LogLevel(str, Enum):
    """Message severities, ordered from most to least chatty."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    SILENT = "silent"

    @property
    def rank(self) -> int:
        return _LEVEL_RANK[self]


_LEVEL_RANK: dict[LogLevel, int] = {
    LogLevel.DEBUG: 20,
    LogLevel.INFO: 30,
    LogLevel.WARN: 40,
    LogLevel.ERROR: 50,
    LogLevel.SILENT: 90,
}

_LEVEL_STYLE: dict[LogLevel, str] = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "bold cyan",
    LogLevel.WARN: "bold yellow",
    LogLevel.ERROR: "bold red",
}


@dataclass(frozen=True, slots=True)
class LogMessage:
    """A single message handed to a :class:`LogDestination`."""

    level: LogLevel
    label: str | None
    text: str
    time: datetime


class LogDestination(Protocol):
    """Anything that can receive formatted log messages."""

    def write(self, message: LogMessage) -> None:
        ...  # pragma: no cover


class StderrDestination:
    """Default destination: Rich on stderr, plain ``print`` as fallback."""

    def write(self, message: LogMessage) -> None:
        stamp = message.time.strftime("%H:%M")
        label = f"[{message.label}] " if message.label else ""
        try:
            from rich.console import Console
            from rich.text import Text
        except ModuleNotFoundError:
            print(f"{stamp} {label}{message.text}", file=sys.stderr)
            return

        rich_console = Console(stderr=True, highlight=False)
        line = Text(f"{stamp} ", style="dim")
        line.append(label, style=_LEVEL_STYLE.get(message.level, ""))
        line.append(message.text)
        rich_console.print(line)


default_log_destination: LogDestination = StderrDestination()


@dataclass(frozen=True, slots=True)
class LoggingOptions:
    """Where log output goes and how much of it is shown."""

    destination: LogDestination = field(default=default_log_destination)
    level: LogLevel = LogLevel.INFO


# ---------------------------------------------------------------------------
# Process-wide state
# ---------------------------------------------------------------------------

_verbose_enabled: bool = False
_process_options: LoggingOptions | None = None


def enable_verbose_logging() -> None:
    """Turn on ``debug`` output for the rest of the process lifetime."""
    global _verbose_enabled
    if _verbose_enabled:
        return
    _verbose_enabled = True


def is_verbose_logging_enabled() -> bool:
    return _verbose_enabled


def process_logging_options() -> LoggingOptions:
    """Options chosen by the last :func:`configure_logging` call.

    Collaborators that are not handed options (``check``) log through
    these, so ``--silent`` and ``--verbose`` reach them too.
    """
    return _process_options or LoggingOptions()


def reset_logging() -> None:
    """Clear the verbose flag and process options.  Only the test suite should call this."""
    global _verbose_enabled, _process_options
    _verbose_enabled = False
    _process_options = None


# ---------------------------------------------------------------------------
# Configuration from flags
# ---------------------------------------------------------------------------

def configure_logging(flags: Flags) -> LoggingOptions:
    """Derive :class:`LoggingOptions` from ``--verbose`` / ``--silent``.

    ``--verbose`` wins when both are given.  Enabling it also sets the
    process-wide verbose flag.  The result is also kept as the
    process options returned by :func:`process_logging_options`.
    """
    global _process_options
    if flags.verbose:
        enable_verbose_logging()
        level = LogLevel.DEBUG
    elif flags.silent:
        level = LogLevel.SILENT
    else:
        level = LogLevel.INFO
    _process_options = LoggingOptions(level=level)
    return _process_options


# ---------------------------------------------------------------------------
# Emitters
# ---------------------------------------------------------------------------

def _emit(
    options: LoggingOptions,
    level: LogLevel,
    label: str | None,
    text: str,
) -> bool:
    if level.rank < options.level.rank:
        return False
    if level is LogLevel.DEBUG and not _verbose_enabled:
        return False
    options.destination.write(
        LogMessage(level=level, label=label, text=text, time=datetime.now()),
    )
    return True


def debug(options: LoggingOptions, label: str | None, text: str) -> bool:
    return _emit(options, LogLevel.DEBUG, label, text)


def info(options: LoggingOptions, label: str | None, text: str) -> bool:
    return _emit(options, LogLevel.INFO, label, text)


def warn(options: LoggingOptions, label: str | None, text: str) -> bool:
    return _emit(options, LogLevel.WARN, label, text)


def error(options: LoggingOptions, label: str | None, text: str) -> bool:
    return _emit(options, LogLevel.ERROR, label, text)
