"""Content router — serves the route table as Chirp routes.

Every ``ContentRoute`` becomes one GET route.  The handler closes over values
computed at startup and hands them to the page template, so a request never
touches the filesystem or the Markdown converter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from kida.template import Markup

from whisker.theme import PAGE_TEMPLATE, resolve_page_title

if TYPE_CHECKING:
    from chirp import App, Request

    from whisker.content.registrar import ContentRoute
    from whisker.content.table import RouteTable


def page_context(route: ContentRoute, site_title: str = "") -> dict[str, Any]:
    """Build the template context for a content route.

    Shared by the live router and the static exporter so both render the
    same page.
    """
    return {
        "content": Markup(route.html),
        "title": route.title,
        "page_title": resolve_page_title(route.title, route.title_template, site_title),
        "front_matter": dict(route.front_matter),
        "path": route.path,
    }


class ContentRouter:
    """Registers each entry of a ``RouteTable`` on a Chirp app.

    Args:
        table: Frozen route table built at startup.
        app: Chirp App to register routes on (must not yet be frozen).
        site_title: Site name used when composing page titles.

    """

    def __init__(self, table: RouteTable, app: App, *, site_title: str = "") -> None:
        self._table = table
        self._app = app
        self._site_title = site_title
        self._page_count = 0

    @property
    def page_count(self) -> int:
        """Number of content pages registered as routes."""
        return self._page_count

    def register_pages(self) -> None:
        """Register a GET route per table entry.

        Must be called before the Chirp app is frozen (before first request).
        """
        for route in self._table:
            handler = self._make_page_handler(route)
            self._app.route(route.path, name=f"page:{route.path}")(handler)
            self._page_count += 1

    def _make_page_handler(self, route: ContentRoute) -> Any:
        """Create a handler that always returns the same pre-rendered page."""
        from chirp import Template

        context = page_context(route, self._site_title)

        async def page_handler(request: Request) -> Any:
            return Template(PAGE_TEMPLATE, **context)

        page_handler.__name__ = f"page_{self._page_count}"
        page_handler.__qualname__ = f"ContentRouter.page_{self._page_count}"

        return page_handler
