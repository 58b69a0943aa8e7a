"""Whisker theme — page renderer and template/asset fallback chain.

User templates (``templates/``) take priority.  When a template is not found
in the user directory, Kida falls through to the bundled default theme.
Same pattern for static assets.

Thread Safety:
    All returned values are read-only path lists or a Kida environment that
    is never mutated after creation.  Safe for free-threading.

"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from kida import Environment, FileSystemLoader

if TYPE_CHECKING:
    from whisker.config import WhiskerConfig

PAGE_TEMPLATE = "page.html"
TITLE_PLACEHOLDER = ":title"


def _bundled_theme_path() -> Path:
    """Return the absolute path to the bundled default theme."""
    return Path(__file__).parent / "default"


def get_template_dirs(config: WhiskerConfig) -> list[Path]:
    """Return template directories in priority order.

    Returns:
        ``[user_templates_dir, bundled_default_templates]``

    """
    bundled = _bundled_theme_path() / "templates"
    user_dir = config.templates_path

    dirs: list[Path] = []
    if user_dir != bundled and user_dir.is_dir():
        dirs.append(user_dir)
    dirs.append(bundled)
    return dirs


def get_asset_dirs(config: WhiskerConfig) -> list[Path]:
    """Return static asset directories in priority order.

    Returns:
        ``[user_static_dir, bundled_default_assets]``

    """
    bundled = _bundled_theme_path() / "assets"
    user_dir = config.static_path

    dirs: list[Path] = []
    if user_dir != bundled:
        dirs.append(user_dir)
    dirs.append(bundled)
    return dirs


def create_template_env(config: WhiskerConfig, *, debug: bool = False) -> Environment:
    """Create the Kida environment used both for serving and for export.

    Kida's ``FileSystemLoader`` searches the directories in order, so a
    ``page.html`` in the user's templates directory replaces the bundled one.
    """
    return Environment(
        loader=FileSystemLoader([str(d) for d in get_template_dirs(config)]),
        autoescape=True,
        auto_reload=debug,
    )


def resolve_page_title(
    title: str | None,
    title_template: str | None,
    site_title: str = "",
) -> str:
    """Compose the ``<title>`` text for a page.

    ``titleTemplate`` may contain ``:title``, which is replaced with the page
    title.  Without a template the result is ``"<title> | <site_title>"``,
    falling back to whichever of the two is set.

    Examples::

        resolve_page_title("Setup", ":title - Guide")  -> "Setup - Guide"
        resolve_page_title("Setup", None, "Docs")      -> "Setup | Docs"
        resolve_page_title(None, None, "Docs")         -> "Docs"

    """
    if title_template:
        return title_template.replace(TITLE_PLACEHOLDER, title or site_title).strip()
    if title and site_title:
        return f"{title} | {site_title}"
    return title or site_title
