"""Tests for ``astro build`` (infra/build.py) and page helpers (core/pages.py)."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

import pytest

from astro_cli.core.config import validate_config
from astro_cli.core.pages import page_route, parse_frontmatter
from astro_cli.exceptions import BuildError
from astro_cli.infra.build import build, render_sitemap
from astro_cli.logger import LoggingOptions


# ---------------------------------------------------------------------------
# Page helpers
# ---------------------------------------------------------------------------

class TestFrontmatter:
    def test_no_frontmatter(self) -> None:
        fm = parse_frontmatter("# Title\n")
        assert not fm.present
        assert fm.closed
        assert fm.body == "# Title\n"

    def test_parsed(self) -> None:
        fm = parse_frontmatter("---\ntitle: 'Hi'\ndraft: true\n---\nbody\n")
        assert fm.data == {"title": "Hi", "draft": "true"}
        assert fm.draft
        assert fm.body == "body\n"

    def test_unclosed(self) -> None:
        fm = parse_frontmatter("---\ntitle: x\n")
        assert fm.present
        assert not fm.closed


class TestPageRoute:
    @pytest.mark.parametrize(
        ("relative", "route"),
        [
            ("index.md", "/"),
            ("about.html", "/about/"),
            ("blog/index.astro", "/blog/"),
            ("blog/first.md", "/blog/first/"),
        ],
    )
    def test_routes(self, relative: str, route: str) -> None:
        assert page_route(PurePosixPath(relative)) == route


# ---------------------------------------------------------------------------
# build
# ---------------------------------------------------------------------------

class TestBuild:
    def test_writes_pages_and_public(
        self, project: Path, logging_options: LoggingOptions, destination,
    ) -> None:
        config = validate_config({}, cwd=project)
        build(config, logging=logging_options)

        dist = project / "dist"
        assert (dist / "robots.txt").read_text(encoding="utf-8") == "User-agent: *\n"
        assert (dist / "index.html").read_text(encoding="utf-8") == "<h1>Home</h1>\n"
        assert (dist / "blog" / "first.md").read_text(encoding="utf-8") == "# First post\n"
        assert not (dist / "blog" / "wip.md").exists()
        assert not (dist / "sitemap.xml").exists()
        assert destination.texts[-1].startswith("2 page(s) built in")

    def test_drafts_included_when_enabled(
        self, project: Path, logging_options: LoggingOptions,
    ) -> None:
        config = validate_config({"build": {"drafts": True}}, cwd=project)
        build(config, logging=logging_options)
        assert (project / "dist" / "blog" / "wip.md").exists()

    def test_sitemap(self, project: Path, logging_options: LoggingOptions) -> None:
        config = validate_config({"build": {"site": "https://example.com/"}}, cwd=project)
        build(config, logging=logging_options)
        sitemap = (project / "dist" / "sitemap.xml").read_text(encoding="utf-8")
        assert "<loc>https://example.com/</loc>" in sitemap
        assert "<loc>https://example.com/blog/first/</loc>" in sitemap
        assert "wip" not in sitemap

    def test_sitemap_disabled(self, project: Path, logging_options: LoggingOptions) -> None:
        config = validate_config(
            {"build": {"site": "https://example.com", "sitemap": False}}, cwd=project,
        )
        build(config, logging=logging_options)
        assert not (project / "dist" / "sitemap.xml").exists()

    def test_stale_output_is_removed(
        self, project: Path, logging_options: LoggingOptions,
    ) -> None:
        stale = project / "dist" / "old.html"
        stale.parent.mkdir()
        stale.write_text("old", encoding="utf-8")
        build(validate_config({}, cwd=project), logging=logging_options)
        assert not stale.exists()

    def test_missing_pages(self, tmp_path: Path, logging_options: LoggingOptions) -> None:
        with pytest.raises(BuildError, match="Pages directory not found"):
            build(validate_config({}, cwd=tmp_path), logging=logging_options)

    @pytest.mark.parametrize("dist", [".", "src", ".."])
    def test_refuses_to_overwrite_sources(
        self, dist: str, project: Path, logging_options: LoggingOptions,
    ) -> None:
        config = validate_config({"dist": dist}, cwd=project)
        with pytest.raises(BuildError, match="would overwrite"):
            build(config, logging=logging_options)
        assert (project / "src" / "pages" / "index.html").exists()

    @pytest.mark.parametrize(
        "raw", [{"public": "."}, {"public": "site"}, {"dist": "src/pages/out"}],
    )
    def test_refuses_output_inside_copied_sources(
        self, raw: dict[str, str], project: Path, logging_options: LoggingOptions,
    ) -> None:
        (project / "site").mkdir()
        config = validate_config({"dist": "site/dist", **raw}, cwd=project)
        with pytest.raises(BuildError, match="copied into itself"):
            build(config, logging=logging_options)
        assert not (project / "site" / "dist").exists()

    def test_invalid_utf8_page(self, project: Path, logging_options: LoggingOptions) -> None:
        (project / "src" / "pages" / "bad.html").write_bytes(b"\xff\xfe")
        with pytest.raises(BuildError, match="not valid UTF-8"):
            build(validate_config({}, cwd=project), logging=logging_options)


class TestRenderSitemap:
    def test_escapes_urls(self) -> None:
        xml = render_sitemap("https://example.com", ["/a&b/"])
        assert "<loc>https://example.com/a&amp;b/</loc>" in xml
