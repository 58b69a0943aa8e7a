"""Tests for whisker.content.registrar — route names, paths and building."""

from __future__ import annotations

from pathlib import Path

import pytest

from whisker._errors import ContentError
from whisker.content.registrar import (
    ContentRoute,
    MarkdownConverter,
    build_route,
    route_name,
    route_path,
)
from whisker.content.walker import Document

from .conftest import EchoConverter


class TestRouteName:
    """route_name — filename stem, empty for index documents."""

    def test_regular_file(self) -> None:
        assert route_name("setup") == "setup"

    def test_index_file(self) -> None:
        assert route_name("index") == ""

    def test_index_prefix_is_not_index(self) -> None:
        assert route_name("indexes") == "indexes"

    def test_index_is_case_sensitive(self) -> None:
        assert route_name("Index") == "Index"


class TestRoutePath:
    """route_path — ``{base}/{name}`` with index normalization."""

    @pytest.mark.parametrize(
        ("base", "name", "expected"),
        [
            ("", "", "/"),
            ("", "notes", "/notes"),
            ("/guide", "", "/guide"),
            ("/guide", "setup", "/guide/setup"),
            ("/a/b", "c", "/a/b/c"),
        ],
    )
    def test_join(self, base: str, name: str, expected: str) -> None:
        assert route_path(base, name) == expected


class TestBuildRoute:
    """build_route — read, extract and convert one document."""

    def test_setup_guide(self, tmp_site: Path, echo_converter: EchoConverter) -> None:
        doc = Document(tmp_site / "docs" / "guide" / "setup.md", "/guide")
        route = build_route(doc, echo_converter)

        assert route.path == "/guide/setup"
        assert route.title == "Setup Guide"
        assert route.html == "<div>Install steps.</div>"
        assert route.source == doc.path
        assert echo_converter.calls == ["Install steps."]

    def test_root_index_has_no_title(self, tmp_site: Path, echo_converter: EchoConverter) -> None:
        route = build_route(Document(tmp_site / "docs" / "index.md", ""), echo_converter)
        assert route.path == "/"
        assert route.title is None
        assert route.front_matter == {}

    def test_skipped_lines_are_recorded(
        self, tmp_site: Path, echo_converter: EchoConverter, caplog: pytest.LogCaptureFixture,
    ) -> None:
        route = build_route(Document(tmp_site / "docs" / "notes.md", ""), echo_converter)
        assert route.front_matter == {"title": "Notes"}
        assert route.skipped == ("justtext",)
        assert "justtext" in caplog.text

    def test_title_template_passthrough(self, tmp_path: Path, echo_converter: EchoConverter) -> None:
        source = tmp_path / "page.md"
        source.write_text("---\ntitle: Page\ntitleTemplate: :title - Site\n---\nx\n")
        route = build_route(Document(source, ""), echo_converter)
        assert route.title_template == ":title - Site"

    def test_unreadable_document_is_fatal(self, tmp_path: Path, echo_converter: EchoConverter) -> None:
        with pytest.raises(ContentError, match="Cannot read document"):
            build_route(Document(tmp_path / "missing.md", ""), echo_converter)

    def test_invalid_utf8_is_fatal(self, tmp_path: Path, echo_converter: EchoConverter) -> None:
        source = tmp_path / "bad.md"
        source.write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(ContentError):
            build_route(Document(source, ""), echo_converter)

    def test_route_is_frozen(self, tmp_path: Path) -> None:
        route = ContentRoute(path="/", source=tmp_path / "index.md", html="")
        with pytest.raises(AttributeError):
            route.path = "/other"  # type: ignore[misc]


class TestMarkdownConverter:
    """MarkdownConverter — patitas-backed conversion."""

    def test_heading(self) -> None:
        html = MarkdownConverter().convert("# Hi")
        assert "<h1" in html
        assert "Hi" in html

    def test_paragraph(self) -> None:
        html = MarkdownConverter().convert("Install steps.")
        assert "<p>" in html
        assert "Install steps." in html

    def test_empty_source(self) -> None:
        assert MarkdownConverter().convert("") == ""

    def test_real_conversion_in_build_route(self, tmp_site: Path) -> None:
        route = build_route(Document(tmp_site / "docs" / "index.md", ""), MarkdownConverter())
        assert "<h1" in route.html
        assert "Hi" in route.html
