"""Whisker configuration.

WhiskerConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path

from whisker._errors import ConfigError
from whisker._types import CollisionPolicy

COLLISION_POLICIES: tuple[str, ...] = ("last", "first", "error")


@dataclass(frozen=True, slots=True)
class WhiskerConfig:
    """Configuration for a Whisker site.

    Attributes:
        root: Path to the site root directory (contains docs/, templates/, etc.).
              Always resolved to an absolute path on construction.
        host: Bind address for dev/serve modes.
        port: Bind port for dev/serve modes.
        output: Output directory for static export.
        workers: Number of Pounce workers (0 = auto-detect).
        content_dir: Directory containing Markdown documents.
        templates_dir: Directory containing Kida templates that override the
            bundled theme.
        static_dir: Directory containing static assets.
        extension: File extension that marks a document (``.md``).
        site_title: Site name used when composing page titles.
        on_collision: Policy when two documents map to the same path:
            ``last`` (later document wins), ``first`` (earlier document wins)
            or ``error`` (refuse to start).

    """

    root: Path = field(default_factory=Path.cwd)
    host: str = "127.0.0.1"
    port: int = 3000
    output: Path = field(default_factory=lambda: Path("dist"))
    workers: int = 0
    content_dir: str = "docs"
    templates_dir: str = "templates"
    static_dir: str = "static"
    extension: str = ".md"
    site_title: str = ""
    on_collision: CollisionPolicy = "last"

    def __post_init__(self) -> None:
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())
        if not self.extension.startswith(".") or len(self.extension) < 2:
            msg = f"extension must look like '.md', got {self.extension!r}"
            raise ConfigError(msg)
        if self.on_collision not in COLLISION_POLICIES:
            msg = (
                f"on_collision must be one of {', '.join(COLLISION_POLICIES)}, "
                f"got {self.on_collision!r}"
            )
            raise ConfigError(msg)

    @property
    def content_path(self) -> Path:
        """Absolute path to content directory."""
        return self.root / self.content_dir

    @property
    def templates_path(self) -> Path:
        """Absolute path to templates directory."""
        return self.root / self.templates_dir

    @property
    def static_path(self) -> Path:
        """Absolute path to static assets directory."""
        return self.root / self.static_dir

    @property
    def output_path(self) -> Path:
        """Absolute path to output directory."""
        if self.output.is_absolute():
            return self.output
        return self.root / self.output
