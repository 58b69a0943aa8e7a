"""Whisker CLI — whisker dev / whisker build / whisker serve.

Entry point for the ``whisker`` command-line interface.
"""

from __future__ import annotations

import argparse
import logging
import sys

from whisker._errors import WhiskerError
from whisker.config import COLLISION_POLICIES


def _add_content_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("root", nargs="?", default=".", help="Site root directory")
    parser.add_argument("--content-dir", default=None, help="Markdown directory (default: docs)")
    parser.add_argument(
        "--on-collision",
        choices=COLLISION_POLICIES,
        default=None,
        help="What to do when two documents map to the same URL",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every file and route",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the whisker CLI."""
    parser = argparse.ArgumentParser(
        prog="whisker",
        description="Serve a directory of Markdown documents as a site.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    dev_parser = subparsers.add_parser("dev", help="Start development server")
    _add_content_options(dev_parser)
    dev_parser.add_argument("--host", default=None, help="Bind address (default: 127.0.0.1)")
    dev_parser.add_argument("--port", type=int, default=None, help="Bind port (default: 3000)")

    build_parser = subparsers.add_parser("build", help="Export site as static HTML files")
    _add_content_options(build_parser)
    build_parser.add_argument("--output", default=None, help="Output directory (default: dist)")

    serve_parser = subparsers.add_parser("serve", help="Run live production server")
    _add_content_options(serve_parser)
    serve_parser.add_argument("--host", default=None, help="Bind address (default: 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port (default: 8000)")
    serve_parser.add_argument(
        "--workers", type=int, default=None, help="Worker count (default: 0=auto)",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from whisker import __version__

    return __version__


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)-7s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    _configure_logging(args.verbose)

    from whisker.app import build, dev, serve

    content = {"content_dir": args.content_dir, "on_collision": args.on_collision}
    try:
        if args.command == "dev":
            dev(root=args.root, host=args.host, port=args.port, **content)
        elif args.command == "build":
            build(root=args.root, output=args.output, **content)
        elif args.command == "serve":
            serve(
                root=args.root, host=args.host, port=args.port,
                workers=args.workers, **content,
            )
    except WhiskerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
