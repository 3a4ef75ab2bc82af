"""Infrastructure: rewrite the ``integrations`` array of a config file.

Only the single ``integrations = [...]`` line is touched so comments
and formatting elsewhere in the file survive.  Arrays spread over
several lines are not rewritten; the caller gets an
:class:`~astro_cli.exceptions.IntegrationError` asking for a manual edit.
"""

from __future__ import annotations

import json
import re
from collections.abc import Sequence
from pathlib import Path

from astro_cli.exceptions import IntegrationError

_KEY_LINE = re.compile(r"^integrations\s*=", re.MULTILINE)
_SINGLE_LINE = re.compile(r"^integrations\s*=\s*\[[^\]\n]*\][ \t]*(#[^\n]*)?$", re.MULTILINE)
_TABLE_HEADER = re.compile(r"^[ \t]*\[", re.MULTILINE)


def render_integrations(names: Sequence[str]) -> str:
    """Render the TOML line for *names* (``integrations = ["a", "b"]``)."""
    items = ", ".join(json.dumps(name) for name in names)
    return f"integrations = [{items}]"


def _top_level_end(text: str) -> int:
    header = _TABLE_HEADER.search(text)
    return header.start() if header else len(text)


def update_integrations_text(text: str, names: Sequence[str]) -> str:
    """Return *text* with its top-level ``integrations`` set to *names*."""
    line = render_integrations(names)
    boundary = _top_level_end(text)

    key = _KEY_LINE.search(text, 0, boundary)
    if key is None:
        head, tail = text[:boundary], text[boundary:]
        if head and not head.endswith("\n"):
            head += "\n"
        separator = "\n" if tail else ""
        return f"{head}{line}\n{separator}{tail}"

    single = _SINGLE_LINE.search(text, key.start(), boundary)
    if single is None or single.start() != key.start():
        raise IntegrationError(
            "The integrations array spans several lines and cannot be updated automatically.",
            hint=f"Edit it by hand: {line}",
        )
    return text[: single.start()] + line + text[single.end():]


def write_integrations(path: Path, names: Sequence[str]) -> None:
    """Persist *names* as the ``integrations`` array of *path*.

    Creates the file when it does not exist yet.
    """
    try:
        text = path.read_text(encoding="utf-8") if path.exists() else ""
        path.write_text(update_integrations_text(text, names), encoding="utf-8")
    except OSError as exc:
        raise IntegrationError(f"Could not update {path}: {exc.strerror or exc}") from exc
