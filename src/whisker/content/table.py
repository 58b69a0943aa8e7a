"""Route table — every content route, built once at startup.

The table is an explicit object rather than module state: it is filled
during the startup walk, frozen, and then handed to the Chirp router and
the static exporter, which only read from it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from whisker._errors import ContentError, RouteCollisionError
from whisker._types import CollisionPolicy, RoutePath
from whisker.content.registrar import ContentRoute, MarkdownConverter, build_route
from whisker.content.walker import discover_documents

if TYPE_CHECKING:
    from whisker.config import WhiskerConfig

logger = logging.getLogger("whisker.content")


class RouteTable:
    """Ordered mapping of URL path to ``ContentRoute``.

    Args:
        on_collision: What to do when a second route claims a path that is
            already taken — ``last`` replaces it, ``first`` keeps it, ``error``
            raises ``RouteCollisionError``.

    """

    __slots__ = ("_collisions", "_frozen", "_on_collision", "_routes")

    def __init__(self, on_collision: CollisionPolicy = "last") -> None:
        self._on_collision = on_collision
        self._routes: dict[RoutePath, ContentRoute] = {}
        self._collisions: list[tuple[RoutePath, Path, Path]] = []
        self._frozen = False

    def add(self, route: ContentRoute) -> None:
        """Add *route*, applying the collision policy if its path is taken.

        Raises:
            ContentError: If the table is frozen.
            RouteCollisionError: On a duplicate path under the ``error`` policy.

        """
        if self._frozen:
            msg = f"Cannot add route {route.path!r}: route table is frozen"
            raise ContentError(msg)

        existing = self._routes.get(route.path)
        if existing is None:
            self._routes[route.path] = route
            return

        if self._on_collision == "error":
            msg = (
                f"Route {route.path!r} is claimed by both "
                f"{existing.source} and {route.source}"
            )
            raise RouteCollisionError(msg)

        if self._on_collision == "first":
            kept, dropped = existing, route
        else:
            kept, dropped = route, existing
            self._routes[route.path] = route

        self._collisions.append((route.path, kept.source, dropped.source))
        logger.warning(
            "Route %s: serving %s, ignoring %s", route.path, kept.source, dropped.source
        )

    def freeze(self) -> None:
        """Reject any further ``add()`` calls."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        """Whether ``freeze()`` has been called."""
        return self._frozen

    @property
    def paths(self) -> tuple[RoutePath, ...]:
        """Registered paths in insertion order."""
        return tuple(self._routes)

    @property
    def collisions(self) -> list[tuple[RoutePath, Path, Path]]:
        """``(path, kept_source, dropped_source)`` for every collision seen."""
        return list(self._collisions)

    def get(self, path: RoutePath) -> ContentRoute | None:
        """Return the route registered at *path*, or None."""
        return self._routes.get(path)

    def __contains__(self, path: object) -> bool:
        return path in self._routes

    def __iter__(self) -> Iterator[ContentRoute]:
        return iter(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RouteTable):
            return NotImplemented
        return self._routes == other._routes

    __hash__ = None  # type: ignore[assignment]


def build_route_table(
    config: WhiskerConfig,
    converter: MarkdownConverter | None = None,
) -> RouteTable:
    """Walk the content directory and build a frozen route table.

    Runs discovery, front matter extraction and Markdown conversion
    sequentially, one document at a time.

    Raises:
        ContentError: If the content root or any document cannot be read.

    """
    converter = converter or MarkdownConverter()
    discovery = discover_documents(config.content_path, extension=config.extension)
    for path in discovery.ignored:
        logger.debug("Ignoring %s", path)

    table = RouteTable(on_collision=config.on_collision)
    for document in discovery.documents:
        table.add(build_route(document, converter))
    table.freeze()
    return table
