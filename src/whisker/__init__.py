"""Whisker — Markdown docs as routes.

Walks a content directory once at startup, pulls ``key: value`` front matter
out of each Markdown document, and serves every document at a URL that
mirrors the directory tree.

Quick start::

    import whisker

    whisker.dev("my-docs/")

Three modes::

    whisker.dev("my-docs/")       # Local development server
    whisker.build("my-docs/")     # Static export
    whisker.serve("my-docs/")     # Production server

Layout::

    docs/index.md          ->  /
    docs/guide/index.md    ->  /guide
    docs/guide/setup.md    ->  /guide/setup

"""

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "WhiskerConfig",
    "__version__",
    "build",
    "dev",
    "serve",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import whisker`` fast while providing a clean top-level API.
    """
    if name == "WhiskerConfig":
        from whisker.config import WhiskerConfig

        return WhiskerConfig

    if name == "dev":
        from whisker.app import dev

        return dev

    if name == "build":
        from whisker.app import build

        return build

    if name == "serve":
        from whisker.app import serve

        return serve

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
