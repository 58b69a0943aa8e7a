"""Shared test fixtures for whisker."""

from __future__ import annotations

from pathlib import Path

import pytest

from whisker.config import WhiskerConfig


class EchoConverter:
    """Stand-in converter that wraps the source in a marker element.

    Keeps table and router tests independent of patitas' exact output.
    """

    def __init__(self) -> None:
        self.calls: list[str] = []

    def convert(self, source: str) -> str:
        self.calls.append(source)
        return f"<div>{source}</div>"


@pytest.fixture
def echo_converter() -> EchoConverter:
    return EchoConverter()


@pytest.fixture
def tmp_site(tmp_path: Path) -> Path:
    """Create a minimal docs site.

    Layout::

        docs/index.md           -> /
        docs/notes.md           -> /notes
        docs/guide/index.md     -> /guide
        docs/guide/setup.md     -> /guide/setup
        docs/guide/diagram.png  (ignored)
        static/site.css

    """
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "index.md").write_text("# Hi\n")
    (docs / "notes.md").write_text(
        "---\njusttext\ntitle: Notes\n---\n\nSome notes.\n"
    )

    guide = docs / "guide"
    guide.mkdir()
    (guide / "index.md").write_text("---\ntitle: Guide\n---\n\n# Guide\n")
    (guide / "setup.md").write_text(
        "---\ntitle: Setup Guide\n---\nInstall steps.\n"
    )
    (guide / "diagram.png").write_bytes(b"\x89PNG\r\n\x1a\n")

    static = tmp_path / "static"
    static.mkdir()
    (static / "site.css").write_text("body { margin: 0; }\n")

    return tmp_path


@pytest.fixture
def site_config(tmp_site: Path) -> WhiskerConfig:
    return WhiskerConfig(root=tmp_site)
