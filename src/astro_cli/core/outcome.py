"""Terminal outcomes of an invocation and failure classification.

The dispatcher never terminates the process itself.  It returns one of
:class:`Success`, :class:`Failure` or :class:`RunForever` and the CLI
boundary turns that value into an exit code (or keeps the process
resident).

Failures are classified once, here, into a :class:`ClassifiedError` so
that rendering is a plain match on :class:`ErrorKind`.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from enum import Enum

from astro_cli.exceptions import AstroError, ConfigIssue, ConfigValidationError


# ---------------------------------------------------------------------------
# Error classification
# ---------------------------------------------------------------------------

class ErrorKind(str, Enum):
    VALIDATION = "validation"
    """Structured, field-level config validation failure."""

    TRACED = "traced"
    """An exception that was raised and carries a call-stack trace."""

    OPAQUE = "opaque"
    """Anything else: rendered as its string form."""


@dataclass(frozen=True, slots=True)
class ClassifiedError:
    kind: ErrorKind
    message: str
    trace: tuple[str, ...] = ()
    issues: tuple[ConfigIssue, ...] = ()
    hint: str | None = None
    exception: BaseException | None = field(default=None, compare=False, repr=False)


def _trace_lines(exc: BaseException) -> tuple[str, ...]:
    lines: list[str] = []
    for chunk in traceback.format_tb(exc.__traceback__):
        lines.extend(line.rstrip() for line in chunk.splitlines() if line.strip())
    return tuple(lines)


def classify_error(exc: BaseException) -> ClassifiedError:
    """Classify *exc*, most specific kind first."""
    hint = exc.hint if isinstance(exc, AstroError) else None

    if isinstance(exc, ConfigValidationError):
        return ClassifiedError(
            kind=ErrorKind.VALIDATION,
            message=str(exc),
            issues=exc.issues,
            hint=hint,
            exception=exc,
        )

    if exc.__traceback__ is not None:
        text = str(exc)
        headline = f"{type(exc).__name__}: {text}" if text else type(exc).__name__
        return ClassifiedError(
            kind=ErrorKind.TRACED,
            message=headline,
            trace=_trace_lines(exc),
            hint=hint,
            exception=exc,
        )

    return ClassifiedError(
        kind=ErrorKind.OPAQUE,
        message=str(exc) or repr(exc),
        hint=hint,
        exception=exc,
    )


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Success:
    exit_code: int = 0


@dataclass(frozen=True, slots=True)
class Failure:
    exit_code: int
    error: ClassifiedError

    @classmethod
    def from_exception(cls, exc: BaseException, exit_code: int = 1) -> Failure:
        return cls(exit_code=exit_code, error=classify_error(exc))


@dataclass(frozen=True, slots=True)
class RunForever:
    """A long-running service was started; the process must stay alive."""


Outcome = Success | Failure | RunForever
