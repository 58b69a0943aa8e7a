"""Directory walker — finds Markdown documents under the content root.

Discovery is kept separate from route building: the walker only reports
which files are documents and which URL prefix each one lives under.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from whisker._errors import ContentError
from whisker._types import BasePath

logger = logging.getLogger("whisker.content")


@dataclass(frozen=True, slots=True)
class Document:
    """A Markdown source file found during discovery.

    Attributes:
        path: Absolute path to the file.
        base_path: URL prefix of the containing directory (``""`` for the
            content root, ``"/guide"`` for ``docs/guide/``).

    """

    path: Path
    base_path: BasePath

    @property
    def stem(self) -> str:
        """Filename without its extension."""
        return self.path.stem


@dataclass(frozen=True, slots=True)
class Discovery:
    """Result of walking a content tree.

    Attributes:
        documents: Documents in traversal order.
        ignored: Files skipped because their extension did not match, and
            symbolic links.

    """

    documents: tuple[Document, ...]
    ignored: tuple[Path, ...] = ()


def discover_documents(
    root: Path,
    base_path: BasePath = "",
    *,
    extension: str = ".md",
) -> Discovery:
    """Walk *root* recursively and collect every document.

    Subdirectories extend the base path with ``/<dirname>``.  Symbolic links
    are never followed; they are reported in ``ignored``.  Entries are
    visited in sorted name order, so the result is the same on every
    platform and for every run over an unchanged tree.

    Raises:
        ContentError: If *root* (or any directory below it) is missing or
            cannot be listed.

    """
    documents: list[Document] = []
    ignored: list[Path] = []
    _walk(root.absolute(), base_path, extension, documents, ignored)
    return Discovery(documents=tuple(documents), ignored=tuple(ignored))


def _walk(
    directory: Path,
    base_path: BasePath,
    extension: str,
    documents: list[Document],
    ignored: list[Path],
) -> None:
    logger.debug("Reading dir: %s", directory)
    if not directory.is_dir():
        msg = f"Content directory not found: {directory}"
        raise ContentError(msg)
    try:
        children = sorted(directory.iterdir())
    except OSError as exc:
        msg = f"Cannot read content directory {directory}: {exc}"
        raise ContentError(msg) from exc

    for child in children:
        if child.is_symlink():
            logger.debug("Not following symlink: %s", child)
            ignored.append(child)
        elif child.is_dir():
            _walk(child, f"{base_path}/{child.name}", extension, documents, ignored)
        elif child.is_file() and child.suffix == extension:
            logger.debug("Reading file: %s", child)
            documents.append(Document(path=child, base_path=base_path))
        else:
            ignored.append(child)
