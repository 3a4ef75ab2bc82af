"""Infrastructure: ``astro build``: write the site into ``dist``.

Steps:

1. Recreate the output directory.
2. Copy ``public`` verbatim.
3. Copy each page with its frontmatter stripped, skipping drafts
   unless drafts are enabled.
4. Write ``sitemap.xml`` when a ``site`` is configured.
"""

from __future__ import annotations

import shutil
import time
from collections.abc import Iterator, Sequence
from pathlib import Path, PurePosixPath
from xml.sax.saxutils import escape

from astro_cli import logger
from astro_cli.core.config import AstroConfig
from astro_cli.core.pages import PAGE_SUFFIXES, page_route, parse_frontmatter
from astro_cli.exceptions import BuildError
from astro_cli.logger import LoggingOptions


def iter_pages(pages_dir: Path) -> Iterator[Path]:
    """Yield page files under *pages_dir* in a stable order."""
    for path in sorted(pages_dir.rglob("*")):
        if path.is_file() and path.suffix in PAGE_SUFFIXES:
            yield path


def render_sitemap(site: str, routes: Sequence[str]) -> str:
    base = site.rstrip("/")
    entries = "".join(
        f"  <url><loc>{escape(base + route)}</loc></url>\n" for route in routes
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        f"{entries}"
        "</urlset>\n"
    )


def _build_pages(config: AstroConfig, logging: LoggingOptions) -> list[str]:
    routes: list[str] = []
    for page in iter_pages(config.pages):
        relative = PurePosixPath(page.relative_to(config.pages).as_posix())
        frontmatter = parse_frontmatter(page.read_text(encoding="utf-8"))
        if frontmatter.draft and not config.build.drafts:
            logger.debug(logging, "build", f"skipping draft {relative}")
            continue

        target = config.dist / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(frontmatter.body, encoding="utf-8")
        routes.append(page_route(relative))
        logger.debug(logging, "build", f"{relative} -> {target.relative_to(config.dist)}")
    return routes


def _check_output_dir(config: AstroConfig) -> None:
    """Refuse a ``dist`` that would wipe, or be copied into, project sources."""
    dist = config.dist
    for source in (config.project_root, config.src, config.pages, config.public):
        if source == dist or dist in source.parents:
            raise BuildError(
                f"Output directory {dist} would overwrite {source}.",
                hint="Point `dist` in astro.config.toml at a separate directory.",
            )
    for source in (config.pages, config.public):
        if source in dist.parents:
            raise BuildError(
                f"Output directory {dist} is inside {source} and would be copied into itself.",
                hint="Point `dist` in astro.config.toml outside your pages and public directories.",
            )


def build(config: AstroConfig, *, logging: LoggingOptions) -> None:
    """Build the project described by *config* into ``config.dist``.

    Raises
    ------
    BuildError
        When the pages directory is missing or the output cannot be written.
    """
    started = time.perf_counter()
    if not config.pages.is_dir():
        raise BuildError(
            f"Pages directory not found: {config.pages}",
            hint="Create it, or point `pages` in astro.config.toml at your pages.",
        )
    _check_output_dir(config)

    try:
        if config.dist.exists():
            shutil.rmtree(config.dist)
        config.dist.mkdir(parents=True)
        if config.public.is_dir():
            shutil.copytree(config.public, config.dist, dirs_exist_ok=True)

        routes = _build_pages(config, logging)

        if config.build.site is not None and config.build.sitemap:
            sitemap = config.dist / "sitemap.xml"
            sitemap.write_text(render_sitemap(str(config.build.site), routes), encoding="utf-8")
            logger.info(logging, "build", f"sitemap.xml with {len(routes)} URL(s)")
    except UnicodeDecodeError as exc:
        raise BuildError(
            f"A page is not valid UTF-8: {exc}",
            hint="Run `astro check` to find it.",
        ) from exc
    except OSError as exc:
        raise BuildError(f"Could not write build output: {exc}") from exc

    elapsed = time.perf_counter() - started
    logger.info(logging, "build", f"{len(routes)} page(s) built in {elapsed:.2f}s")
