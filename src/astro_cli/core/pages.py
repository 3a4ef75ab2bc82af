"""Pure helpers for page files: frontmatter and routes.

A page may open with a ``---`` fenced frontmatter block of simple
``key: value`` lines.  Nothing here touches the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath

PAGE_SUFFIXES: frozenset[str] = frozenset({".astro", ".md", ".html"})

FENCE = "---"


@dataclass(frozen=True, slots=True)
class Frontmatter:
    present: bool = False
    closed: bool = True
    data: dict[str, str] = field(default_factory=dict)
    body: str = ""

    @property
    def draft(self) -> bool:
        return self.data.get("draft", "").lower() == "true"


def parse_frontmatter(text: str) -> Frontmatter:
    """Split *text* into frontmatter data and body.

    An opening fence without a closing one yields ``closed=False`` and
    treats the whole text as body.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != FENCE:
        return Frontmatter(body=text)

    data: dict[str, str] = {}
    for index, line in enumerate(lines[1:], start=1):
        stripped = line.strip()
        if stripped == FENCE:
            return Frontmatter(
                present=True,
                data=data,
                body="".join(lines[index + 1:]),
            )
        key, sep, value = stripped.partition(":")
        if sep and key:
            data[key.strip()] = value.strip().strip("'\"")
    return Frontmatter(present=True, closed=False, body=text)


def page_route(relative: PurePosixPath) -> str:
    """URL path for a page at *relative* inside the pages directory.

    ``index.md`` maps to ``/``, ``blog/post.md`` to ``/blog/post/``.
    """
    parts = list(relative.with_suffix("").parts)
    if parts and parts[-1] == "index":
        parts.pop()
    if not parts:
        return "/"
    return "/" + "/".join(parts) + "/"
