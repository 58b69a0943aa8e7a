"""Startup banner — mode-aware status output.

Detects ``NO_COLOR`` / ``TERM`` for safe fallback.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from whisker.config import WhiskerConfig


def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_CYAN = "\033[36m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""

_MODE_STYLES: dict[str, str] = {
    "dev": _GREEN,
    "build": _YELLOW,
    "serve": _CYAN,
}


def _mode_badge(mode: str) -> str:
    """Return a styled [mode] badge."""
    return f"{_MODE_STYLES.get(mode, _DIM)}[{mode}]{_RESET}"


def print_banner(
    config: WhiskerConfig,
    page_count: int,
    mode: str,
    *,
    load_ms: float = 0.0,
    warnings: list[str] | None = None,
) -> None:
    """Print the Whisker startup banner to stderr.

    Args:
        config: Resolved WhiskerConfig.
        page_count: Number of content routes loaded.
        mode: One of ``"dev"``, ``"build"``, ``"serve"``.
        load_ms: Time spent loading content in milliseconds.
        warnings: Optional list of warning messages to display.

    """
    from whisker import __version__

    lines: list[str] = [
        "",
        f"  {_BOLD}Whisker{_RESET} {_DIM}v{__version__}{_RESET}  {_mode_badge(mode)}",
        f"  {_DIM}{'─' * 43}{_RESET}",
    ]

    pages_label = "page" if page_count == 1 else "pages"
    timing = f" {_DIM}in {load_ms:.0f}ms{_RESET}" if load_ms > 0 else ""
    lines.append(f"  {_DIM}├─{_RESET} {page_count} {pages_label} loaded{timing}")
    lines.append(f"  {_DIM}├─{_RESET} content: {_DIM}{config.content_path}{_RESET}")

    if mode == "build":
        lines.append(f"  {_DIM}└─{_RESET} output: {_DIM}{config.output_path}{_RESET}")
    elif mode == "serve":
        workers_label = str(config.workers) if config.workers > 0 else "auto"
        lines.append(f"  {_DIM}└─{_RESET} workers: {workers_label}")

    if mode in ("dev", "serve"):
        lines.append("")
        lines.append(f"  {_BOLD}{_CYAN}http://{config.host}:{config.port}{_RESET}")

    if warnings:
        lines.append("")
        lines.extend(f"  {_YELLOW}!{_RESET} {w}" for w in warnings)

    lines.append("")

    print("\n".join(lines), file=sys.stderr)
