"""Infrastructure: ``astro check``: report problems in page files.

The check pass never raises for problems it finds; it reports them and
returns the exit code for the process: ``1`` when any error was found,
``0`` otherwise.  Warnings alone do not fail the check.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from astro_cli import logger
from astro_cli.core.config import AstroConfig
from astro_cli.core.pages import parse_frontmatter
from astro_cli.infra.build import iter_pages
from astro_cli.logger import LoggingOptions


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    path: Path
    severity: Severity
    message: str


def check_page(path: Path) -> list[Diagnostic]:
    """Return diagnostics for a single page file."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        return [Diagnostic(path, Severity.ERROR, "File is not valid UTF-8")]
    except OSError as exc:
        return [Diagnostic(path, Severity.ERROR, f"Could not read file: {exc.strerror or exc}")]

    if not text.strip():
        return [Diagnostic(path, Severity.WARNING, "Page is empty")]

    frontmatter = parse_frontmatter(text)
    if not frontmatter.closed:
        return [Diagnostic(path, Severity.ERROR, "Frontmatter is missing its closing ---")]
    if frontmatter.present and not frontmatter.body.strip():
        return [Diagnostic(path, Severity.WARNING, "Page has frontmatter but no content")]
    return []


def collect_diagnostics(config: AstroConfig) -> list[Diagnostic]:
    if not config.pages.is_dir():
        return [Diagnostic(config.pages, Severity.ERROR, "Pages directory not found")]
    diagnostics: list[Diagnostic] = []
    for page in iter_pages(config.pages):
        diagnostics.extend(check_page(page))
    return diagnostics


def check(config: AstroConfig, *, logging: LoggingOptions | None = None) -> int:
    """Check every page of *config* and return the exit code to use."""
    logging = logging or logger.process_logging_options()
    diagnostics = collect_diagnostics(config)

    for diag in diagnostics:
        try:
            shown = diag.path.relative_to(config.project_root)
        except ValueError:
            shown = diag.path
        emit = logger.error if diag.severity is Severity.ERROR else logger.warn
        emit(logging, "check", f"{shown}: {diag.message}")

    errors = sum(1 for d in diagnostics if d.severity is Severity.ERROR)
    warnings = len(diagnostics) - errors
    logger.info(logging, "check", f"Result: {errors} error(s), {warnings} warning(s)")
    return 1 if errors else 0
