"""Route registrar — turns discovered documents into content routes.

Each document is read, split into front matter and body, and converted to
HTML exactly once.  The resulting ``ContentRoute`` is what every request for
that URL gets back; nothing is re-rendered per request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from whisker._errors import ContentError
from whisker._types import BasePath, FrontMatter, RoutePath
from whisker.content.frontmatter import extract_front_matter
from whisker.content.walker import Document

if TYPE_CHECKING:
    from patitas import Markdown

logger = logging.getLogger("whisker.content")

INDEX_NAME = "index"

_DEFAULT_PLUGINS = ("table", "strikethrough", "task_lists")


def route_name(stem: str) -> str:
    """Return the URL segment for a document filename stem.

    ``setup`` -> ``"setup"``; ``index`` -> ``""`` (the directory itself).
    """
    return "" if stem == INDEX_NAME else stem


def route_path(base_path: BasePath, name: str) -> RoutePath:
    """Join a base path and a route name into a URL path.

    Index documents (empty *name*) map to the directory path without a
    trailing slash; the content root maps to ``/``::

        route_path("", "")              -> "/"
        route_path("/guide", "")        -> "/guide"
        route_path("/guide", "setup")   -> "/guide/setup"

    """
    if name:
        return f"{base_path}/{name}"
    return base_path or "/"


class MarkdownConverter:
    """Markdown to HTML conversion via patitas.

    Holds one ``patitas.Markdown`` instance for the whole startup pass.

    Args:
        plugins: Patitas plugins to enable.

    """

    __slots__ = ("_md",)

    def __init__(self, plugins: tuple[str, ...] = _DEFAULT_PLUGINS) -> None:
        from patitas import Markdown

        self._md: Markdown = Markdown(plugins=list(plugins))

    def convert(self, source: str) -> str:
        """Render Markdown *source* to an HTML string."""
        if not source:
            return ""
        return self._md(source)


@dataclass(frozen=True, slots=True)
class ContentRoute:
    """A document resolved to its URL and pre-rendered HTML.

    Attributes:
        path: URL path the document is served at.
        source: Absolute path of the source document.
        html: Body converted to HTML.
        title: ``title`` front matter value, if any.
        front_matter: All parsed front matter pairs.
        skipped: Front matter lines that did not parse.

    """

    path: RoutePath
    source: Path
    html: str
    title: str | None = None
    front_matter: FrontMatter = field(default_factory=dict)
    skipped: tuple[str, ...] = ()

    @property
    def title_template(self) -> str | None:
        """``titleTemplate`` front matter value, passed through to the renderer."""
        return self.front_matter.get("titleTemplate")


def build_route(document: Document, converter: MarkdownConverter) -> ContentRoute:
    """Read, parse and convert one document.

    Raises:
        ContentError: If the file cannot be read or is not valid UTF-8.

    """
    path = route_path(document.base_path, route_name(document.stem))
    logger.debug("Adding route: %s as %s", document.path, path)

    try:
        raw = document.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read document {document.path}: {exc}"
        raise ContentError(msg) from exc

    result = extract_front_matter(raw)
    for line in result.skipped:
        logger.warning("%s: ignoring front matter line %r", document.path, line)

    return ContentRoute(
        path=path,
        source=document.path,
        html=converter.convert(result.content),
        title=result.front_matter.get("title"),
        front_matter=result.front_matter,
        skipped=result.skipped,
    )
