"""Render a :class:`ClassifiedError` for the user.

Each :class:`ErrorKind` has its own look: a field-by-field config
report, a red headline over a dimmed trace, or a single red line.
"""

from __future__ import annotations

from astro_cli.cli.console import console
from astro_cli.core.outcome import ClassifiedError, ErrorKind
from astro_cli.exceptions import ConfigIssue


def escape(text: str) -> str:
    """Escape Rich markup in *text*; identity when Rich is missing."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


def format_config_error(issues: tuple[ConfigIssue, ...]) -> str:
    """Field-level summary of a config validation failure."""
    width = max((len(issue.location) for issue in issues), default=0)
    noun = "issue" if len(issues) == 1 else "issues"
    lines = [f"[red]\\[config][/red] Astro found {noun} with your configuration:"]
    for issue in issues:
        location = escape(issue.location.ljust(width))
        lines.append(f"  [red]![/red] [bold]{location}[/bold]  {escape(issue.message)}")
    return "\n".join(lines)


def render_error(error: ClassifiedError) -> None:
    if error.kind is ErrorKind.VALIDATION:
        console.print(format_config_error(error.issues))
    elif error.kind is ErrorKind.TRACED:
        console.print(f"[red]{escape(error.message)}[/red]")
        if error.trace:
            trace = "\n".join(error.trace)
            console.print(f"[dim]{escape(trace)}[/dim]")
    else:
        console.print(f"[red]{escape(error.message)}[/red]")

    if error.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(error.hint)}")
