"""Content layer — Markdown documents as routes.

Handles discovery (walker), front matter extraction, route building and
registration of the resulting table on a Chirp app.
"""

from whisker.content.frontmatter import FrontMatterResult, extract_front_matter
from whisker.content.registrar import (
    ContentRoute,
    MarkdownConverter,
    build_route,
    route_name,
    route_path,
)
from whisker.content.router import ContentRouter
from whisker.content.table import RouteTable, build_route_table
from whisker.content.walker import Discovery, Document, discover_documents

__all__ = [
    "ContentRoute",
    "ContentRouter",
    "Discovery",
    "Document",
    "FrontMatterResult",
    "MarkdownConverter",
    "RouteTable",
    "build_route",
    "build_route_table",
    "discover_documents",
    "extract_front_matter",
    "route_name",
    "route_path",
]
