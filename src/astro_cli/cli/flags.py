"""Turn raw process arguments into a read-only :class:`Flags` value.

Only flags that were actually given end up in the mapping, so an absent
flag and a flag explicitly set to a falsy value stay distinguishable.
Unknown ``--name[=value]`` options are kept (``--no-name`` becomes
``False``) so collaborators can read flags this parser does not know.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from astro_cli.core.models import Flags, FlagValue


_SHORT_FLAGS: dict[str, str] = {"-h": "help", "-V": "version", "-y": "yes"}

_VALUE_OPTIONS: dict[str, str] = {
    "--project-root": "PATH",
    "--config": "PATH",
    "--port": "N",
    "--site": "URL",
}
"""Options that take exactly one value, with their metavars."""

_OPTIONAL_VALUE_OPTIONS: dict[str, str] = {"--host": "ADDR"}


class _ParseError(Exception):
    pass


class _QuietParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise _ParseError(message)


def _build_parser() -> _QuietParser:
    """Construct the flag parser.

    Help and version are plain flags here; rendering them is the
    dispatcher's job, so argparse must never print or exit on its own.
    """
    parser = _QuietParser(
        prog="astro",
        add_help=False,
        allow_abbrev=False,
        argument_default=argparse.SUPPRESS,
    )
    parser.add_argument("positionals", nargs="*", default=[])
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-V", "--version", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--silent", action="store_true")
    for option, metavar in _VALUE_OPTIONS.items():
        parser.add_argument(option, metavar=metavar)
    for option, metavar in _OPTIONAL_VALUE_OPTIONS.items():
        parser.add_argument(option, nargs="?", const=True, metavar=metavar)
    parser.add_argument("--sitemap", action=argparse.BooleanOptionalAction)
    parser.add_argument("--drafts", action="store_true")
    parser.add_argument("-y", "--yes", action="store_true")
    return parser


def _parse_unknown(tokens: Sequence[str]) -> tuple[dict[str, FlagValue], list[str]]:
    """Scan *tokens* without argparse.

    Known valued options still take the following token as their value,
    so one malformed option cannot turn the others into positionals.
    """
    values: dict[str, FlagValue] = {}
    rest: list[str] = []
    pending = list(tokens)
    pending.reverse()
    while pending:
        token = pending.pop()
        if token in _SHORT_FLAGS:
            values[_SHORT_FLAGS[token]] = True
            continue
        if token == "--":
            continue
        if not token.startswith("--"):
            rest.append(token)
            continue
        name, sep, value = token[2:].partition("=")
        key = name.replace("-", "_")
        option = f"--{name}"
        takes_value = option in _VALUE_OPTIONS or option in _OPTIONAL_VALUE_OPTIONS
        if not sep and takes_value and pending and not pending[-1].startswith("-"):
            values[key] = pending.pop()
        elif sep:
            values[key] = value
        elif key.startswith("no_") and len(key) > 3:
            values[key[3:]] = False
        else:
            values[key] = True
    return values, rest


def parse_flags(argv: Sequence[str]) -> Flags:
    """Parse *argv* (without the program name) into :class:`Flags`.

    Parsing never fails: a malformed option (for example ``--port``
    without a value) is recorded as a bare ``True`` flag instead.
    """
    parser = _build_parser()
    try:
        namespace, unknown = parser.parse_known_intermixed_args(list(argv))
    except _ParseError:
        extra, rest = _parse_unknown(argv)
        return Flags(values=extra, positionals=tuple(rest))

    values: dict[str, FlagValue] = {}
    extra, rest = _parse_unknown(unknown)
    values.update(extra)
    for key, value in vars(namespace).items():
        if key != "positionals":
            values[key] = value

    positionals = [*getattr(namespace, "positionals", []), *rest]
    return Flags(values=values, positionals=tuple(positionals))
