"""Static export — pre-render the route table to HTML files.

Renders every content route through the same page template the live server
uses and writes it to a clean-URL directory layout, then copies static
assets.  The output is deployable to any static host.
"""

from __future__ import annotations

import logging
import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from whisker._errors import ExportError
from whisker.content.router import page_context
from whisker.theme import PAGE_TEMPLATE, get_asset_dirs

if TYPE_CHECKING:
    from kida import Environment

    from whisker.config import WhiskerConfig
    from whisker.content.table import RouteTable

logger = logging.getLogger("whisker.export")

STATIC_PREFIX = "static"


@dataclass(frozen=True, slots=True)
class ExportedFile:
    """Record of a single file written during export.

    Attributes:
        source_path: Logical source (e.g., ``"/guide/setup"``).
        output_path: Absolute filesystem path to the written file.
        source_type: Category of the exported file.
        size_bytes: Size of the written file in bytes.
        duration_ms: Time taken to render and write this file.

    """

    source_path: str
    output_path: Path
    source_type: Literal["content", "asset"]
    size_bytes: int
    duration_ms: float


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Aggregate result of a full static export.

    Attributes:
        files: All files written during export.
        total_pages: Number of content pages exported.
        total_assets: Number of static asset files copied.
        duration_ms: Total wall-clock time for the export.
        output_dir: Absolute path to the output directory.

    """

    files: tuple[ExportedFile, ...]
    total_pages: int
    total_assets: int
    duration_ms: float
    output_dir: Path


class StaticExporter:
    """Exports a route table as static files.

    Args:
        table: Frozen route table.
        env: Kida environment holding the page template.
        config: Frozen Whisker configuration.

    """

    def __init__(self, table: RouteTable, env: Environment, config: WhiskerConfig) -> None:
        self._table = table
        self._env = env
        self._config = config

    def export(self) -> ExportResult:
        """Run the full export pipeline and return the result.

        Pipeline order:
            1. Clean output directory
            2. Render content pages
            3. Copy static assets (user assets override bundled ones)

        Raises:
            ExportError: If any step of the pipeline fails.

        """
        start = time.perf_counter()
        output_dir = self._config.output_path

        self._clean_output(output_dir)
        content_files = self._render_content_pages(output_dir)
        asset_files = self._copy_assets(output_dir)
        all_files = content_files + asset_files

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Exported %d pages and %d assets to %s",
            len(content_files), len(asset_files), output_dir,
        )

        return ExportResult(
            files=tuple(all_files),
            total_pages=len(content_files),
            total_assets=len(asset_files),
            duration_ms=elapsed,
            output_dir=output_dir,
        )

    def _clean_output(self, output_dir: Path) -> None:
        """Remove and recreate the output directory."""
        try:
            if output_dir.exists():
                shutil.rmtree(output_dir)
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            msg = f"Cannot prepare output directory {output_dir}: {exc}"
            raise ExportError(msg) from exc

    def _render_content_pages(self, output_dir: Path) -> list[ExportedFile]:
        """Render all content routes to HTML files."""
        results: list[ExportedFile] = []

        for route in self._table:
            t0 = time.perf_counter()
            context = page_context(route, self._config.site_title)

            try:
                html = self._env.get_template(PAGE_TEMPLATE).render(**context)
            except Exception as exc:
                msg = f"Failed to render {route.path!r} ({route.source}): {exc}"
                raise ExportError(msg) from exc

            filepath = self._permalink_to_filepath(route.path, output_dir)
            size = self._write_html(filepath, html)
            logger.debug("Wrote %s -> %s", route.path, filepath)

            results.append(ExportedFile(
                source_path=route.path,
                output_path=filepath,
                source_type="content",
                size_bytes=size,
                duration_ms=(time.perf_counter() - t0) * 1000,
            ))

        return results

    def _copy_assets(self, output_dir: Path) -> list[ExportedFile]:
        """Copy static assets to ``<output>/static``.

        Bundled theme assets are copied first so that user files with the
        same relative path overwrite them.
        """
        target_root = output_dir / STATIC_PREFIX
        copied: dict[Path, ExportedFile] = {}

        for asset_dir in reversed(get_asset_dirs(self._config)):
            if not asset_dir.is_dir():
                continue
            for source in sorted(asset_dir.rglob("*")):
                if not source.is_file():
                    continue
                t0 = time.perf_counter()
                relative = source.relative_to(asset_dir)
                target = target_root / relative
                try:
                    target.parent.mkdir(parents=True, exist_ok=True)
                    shutil.copy2(source, target)
                except OSError as exc:
                    msg = f"Failed to copy asset {source}: {exc}"
                    raise ExportError(msg) from exc
                copied[relative] = ExportedFile(
                    source_path=f"/{STATIC_PREFIX}/{relative.as_posix()}",
                    output_path=target,
                    source_type="asset",
                    size_bytes=target.stat().st_size,
                    duration_ms=(time.perf_counter() - t0) * 1000,
                )

        return list(copied.values())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _permalink_to_filepath(permalink: str, output_dir: Path) -> Path:
        """Convert a URL path to an output file path.

        Clean URL convention:
            ``/``               -> ``output/index.html``
            ``/guide``          -> ``output/guide/index.html``
            ``/guide/setup``    -> ``output/guide/setup/index.html``

        """
        clean = permalink.strip("/")
        if not clean:
            return output_dir / "index.html"
        return output_dir / clean / "index.html"

    @staticmethod
    def _write_html(filepath: Path, html: str) -> int:
        """Write HTML content to a file, creating parent dirs as needed.

        Returns the size in bytes of the written file.

        """
        try:
            filepath.parent.mkdir(parents=True, exist_ok=True)
            data = html.encode("utf-8")
            filepath.write_bytes(data)
        except OSError as exc:
            msg = f"Failed to write {filepath}: {exc}"
            raise ExportError(msg) from exc
        return len(data)
