"""Front matter extraction — a tiny alternative to a full YAML header parser.

Documents may open with a block fenced by ``---`` lines holding one
``key: value`` pair per line::

    ---
    title: Setup Guide
    titleTemplate: ":title | Docs"
    ---
    Install steps.

Parsing is tolerant: lines that are not ``key: value`` pairs are reported in
``FrontMatterResult.skipped`` instead of raising.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from whisker._types import FrontMatter

# A line of exactly three hyphens, any content (non-greedy), another such line.
_BLOCK_RE = re.compile(r"^---$\n(?P<body>[\s\S]*?)\n^---$", re.MULTILINE)
_KEY_VALUE_RE = re.compile(r"(\w+): ?(.*)")
_WRAPPING_QUOTES_RE = re.compile(r"""^["']|["']$""")


@dataclass(frozen=True, slots=True)
class FrontMatterResult:
    """Front matter and body split out of a raw document.

    Attributes:
        front_matter: Parsed ``key: value`` pairs (last duplicate wins).
        content: Document body with the block removed, whitespace-trimmed.
        skipped: Non-blank lines inside the block that were not key/value pairs.

    """

    front_matter: FrontMatter = field(default_factory=dict)
    content: str = ""
    skipped: tuple[str, ...] = ()


def extract_front_matter(raw: str) -> FrontMatterResult:
    """Split *raw* into its front matter mapping and body.

    When no ``---`` block is present the mapping is empty and the body is the
    whole text, trimmed.

    """
    match = _BLOCK_RE.search(raw)
    if match is None:
        return FrontMatterResult(content=raw.strip())

    content = (raw[: match.start()] + raw[match.end() :]).strip()
    front_matter, skipped = parse_front_matter(match.group("body"))
    return FrontMatterResult(front_matter=front_matter, content=content, skipped=skipped)


def parse_front_matter(block: str) -> tuple[FrontMatter, tuple[str, ...]]:
    """Parse the interior of a front matter block.

    Returns the mapping and the lines that did not parse.
    """
    front_matter: FrontMatter = {}
    skipped: list[str] = []
    for line in block.strip().splitlines():
        if not line.strip():
            continue
        match = _KEY_VALUE_RE.search(line)
        if match is None:
            skipped.append(line)
            continue
        key, value = match.groups()
        front_matter[key] = _unquote(value.strip())
    return front_matter, tuple(skipped)


def _unquote(value: str) -> str:
    """Drop one wrapping quote character from each end of *value*."""
    return _WRAPPING_QUOTES_RE.sub("", value)
