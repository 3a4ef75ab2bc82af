"""Help and version output for ``astro``.

Both paths must work without Rich installed: they are the first thing
a user runs on a broken install.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from astro_cli.cli.console import console

VERSION_ENV_VAR: str = "PACKAGE_VERSION"

COMMANDS: tuple[tuple[str, str], ...] = (
    ("add", "Add an integration to your configuration."),
    ("dev", "Run Astro in development mode."),
    ("build", "Build a pre-compiled production-ready site."),
    ("preview", "Preview your build locally before deploying."),
    ("check", "Check your project for errors."),
    ("--version", "Show the version number and exit."),
    ("--help", "Show this help message."),
)

FLAGS: tuple[tuple[str, str], ...] = (
    ("--host [optional IP]", "Expose server on network"),
    ("--port <n>", "Port for the dev and preview servers."),
    ("--config <path>", "Specify the path to the Astro config file."),
    ("--project-root <path>", "Specify the path to the project root folder."),
    ("--site <url>", "Public site URL, used for the sitemap."),
    ("--no-sitemap", "Disable sitemap generation (build only)."),
    ("--drafts", "Include markdown draft pages in the build."),
    ("--yes", "Skip confirmation prompts (add only)."),
    ("--verbose", "Enable verbose logging"),
    ("--silent", "Disable logging"),
)


def _print_plain_help(
    command_name: str,
    headline: str,
    sections: Sequence[tuple[str, Sequence[tuple[str, str]]]],
) -> None:
    """Render help without Rich."""
    width = max(len(row[0]) for _, rows in sections for row in rows) + 2
    print(f"\n  {command_name}  {headline}\n", file=sys.stderr)
    print("  astro [command] [...flags]\n", file=sys.stderr)
    for title, rows in sections:
        print(f"  {title}", file=sys.stderr)
        for name, description in rows:
            print(f"    {name:<{width}}{description}", file=sys.stderr)
        print(file=sys.stderr)


def print_help(
    *,
    command_name: str = "astro",
    headline: str = "Futuristic web development tool.",
    commands: Sequence[tuple[str, str]] = COMMANDS,
    flags: Sequence[tuple[str, str]] = FLAGS,
) -> None:
    """Display usage: headline, commands and flags."""
    sections = (("Commands", commands), ("Flags", flags))
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_help(command_name, headline, sections)
        return

    console.print()
    console.print(f"  [black on green] {command_name} [/black on green] {headline}")
    console.print()
    console.print("  [green]astro[/green] [bold]\\[command][/bold] [dim]\\[...flags][/dim]")
    for title, rows in sections:
        table = Table(
            title=title,
            title_justify="left",
            title_style="bold",
            show_header=False,
            box=None,
            padding=(0, 2),
        )
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Description", style="dim")
        for name, description in rows:
            table.add_row(name, description)
        console.print()
        console.print(table)
    console.print()


def read_version() -> str:
    """Version string from the environment, ``""`` when unset."""
    return os.environ.get(VERSION_ENV_VAR, "")


def print_version() -> None:
    """Display the ``--version`` badge."""
    version = read_version()
    console.print()
    console.print(f"  [black on green] astro [/black on green] [green]v{version}[/green]")
