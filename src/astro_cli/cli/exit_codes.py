"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.  The
``check`` command is the one path that picks its own exit code.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit: help, version, ``add`` and ``build`` completed."""

GENERAL_ERROR: int = 1
"""Any classified failure.  The error was rendered before exiting."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
