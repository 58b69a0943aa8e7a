"""Whisker application — route table + Chirp app wiring.

The three public functions (dev, build, serve) are the primary entry points.
Each one walks the content directory exactly once, before anything is
served or written; a failure there aborts startup.
"""

import logging
import sys
import time
from pathlib import Path
from typing import TYPE_CHECKING

from whisker.config import WhiskerConfig
from whisker.config_loader import load_config
from whisker.content.table import RouteTable, build_route_table
from whisker.theme import create_template_env

if TYPE_CHECKING:
    from chirp import App
    from kida import Environment

    from whisker.content.router import ContentRouter
    from whisker.export.static import ExportResult

logger = logging.getLogger("whisker.app")

# Production binding when neither whisker.yaml nor the caller sets one.
_SERVE_DEFAULTS: dict[str, object] = {"host": "0.0.0.0", "port": 8000}


def _load_content(config: WhiskerConfig) -> RouteTable:
    """Build the frozen route table for the configured content directory.

    Raises:
        ContentError: If the content root or a document cannot be read.

    """
    logger.info("Loading content from %s", config.content_path)
    table = build_route_table(config)
    logger.info("Loaded %d routes", len(table))
    return table


def _create_chirp_app(
    config: WhiskerConfig,
    env: Environment,
    *,
    debug: bool = False,
) -> App:
    """Create a Chirp App that renders pages with *env*.

    The Kida environment is built by ``whisker.theme`` with the user/bundled
    template fallback chain and passed to Chirp as-is.
    """
    from chirp import App, AppConfig

    app_config = AppConfig(
        template_dir=config.templates_path,
        debug=debug,
        host=config.host,
        port=config.port,
    )
    return App(config=app_config, kida_env=env)


def _wire_content_routes(
    table: RouteTable, app: App, config: WhiskerConfig
) -> tuple[ContentRouter, int]:
    """Register the route table on *app*.

    Returns the ContentRouter instance and the number of pages registered.
    """
    from whisker.content.router import ContentRouter

    router = ContentRouter(table, app, site_title=config.site_title)
    router.register_pages()
    return router, router.page_count


def _mount_static_files(app: App, config: WhiskerConfig) -> None:
    """Mount static file middleware with theme fallback under ``/static``.

    User files take precedence over bundled theme assets.
    """
    from chirp.middleware import StaticFiles

    from whisker.theme import get_asset_dirs

    for asset_dir in get_asset_dirs(config):
        if asset_dir.is_dir():
            app.add_middleware(StaticFiles(directory=asset_dir, prefix="/static"))


def _collision_warnings(table: RouteTable) -> list[str]:
    return [
        f"{path}: serving {kept}, ignoring {dropped}"
        for path, kept, dropped in table.collisions
    ]


def _prepare_app(config: WhiskerConfig, *, debug: bool) -> tuple[App, RouteTable, float]:
    t0 = time.perf_counter()
    table = _load_content(config)
    env = create_template_env(config, debug=debug)
    app = _create_chirp_app(config, env, debug=debug)
    _wire_content_routes(table, app, config)
    _mount_static_files(app, config)
    load_ms = (time.perf_counter() - t0) * 1000
    return app, table, load_ms


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------


def dev(root: str | Path = ".", **kwargs: object) -> None:
    """Start a development server.

    Runs Chirp in debug mode (single worker, template auto-reload).  Content
    is read once at startup; restart to pick up new or edited documents.

    Args:
        root: Path to the site root directory.
        **kwargs: Override WhiskerConfig fields.

    """
    from whisker.banner import print_banner

    config = load_config(Path(root), **kwargs)
    app, table, load_ms = _prepare_app(config, debug=True)

    print_banner(
        config, len(table), mode="dev",
        load_ms=load_ms, warnings=_collision_warnings(table),
    )

    app.run(host=config.host, port=config.port)


def build(root: str | Path = ".", **kwargs: object) -> ExportResult:
    """Export the site as static HTML files.

    Args:
        root: Path to the site root directory.
        **kwargs: Override WhiskerConfig fields.

    Returns:
        The export summary.

    """
    from whisker.banner import print_banner
    from whisker.export.static import StaticExporter

    config = load_config(Path(root), **kwargs)
    t0 = time.perf_counter()
    table = _load_content(config)
    env = create_template_env(config)
    load_ms = (time.perf_counter() - t0) * 1000

    print_banner(
        config, len(table), mode="build",
        load_ms=load_ms, warnings=_collision_warnings(table),
    )

    result = StaticExporter(table, env, config).export()
    _print_export_summary(result)
    return result


def _print_export_summary(result: ExportResult) -> None:
    """Print export completion summary to stderr."""
    lines = [
        "",
        "─" * 41,
        f"  Exported {result.total_pages} page{'s' if result.total_pages != 1 else ''}",
    ]
    if result.total_assets > 0:
        lines.append(
            f"  Copied {result.total_assets} asset{'s' if result.total_assets != 1 else ''}"
        )
    lines.append(f"  Output: {result.output_dir}")
    lines.append(f"  Done in {result.duration_ms:.0f}ms")

    print("\n".join(lines), file=sys.stderr)


def serve(root: str | Path = ".", **kwargs: object) -> None:
    """Run the site as a live Pounce server in production.

    Multiple Pounce workers share the frozen Chirp app and the read-only
    route table; nothing is written after startup.

    Args:
        root: Path to the site root directory.
        **kwargs: Override WhiskerConfig fields.

    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    from whisker.banner import print_banner

    config = load_config(Path(root), defaults=_SERVE_DEFAULTS, **kwargs)
    app, table, load_ms = _prepare_app(config, debug=False)

    print_banner(
        config, len(table), mode="serve",
        load_ms=load_ms, warnings=_collision_warnings(table),
    )

    server_config = ServerConfig(
        host=config.host,
        port=config.port,
        workers=config.workers,  # 0 = auto-detect via Pounce
    )
    Server(server_config, app).run()
