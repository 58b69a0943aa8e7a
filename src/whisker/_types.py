"""Shared type definitions for whisker."""

from typing import Literal

# What to do when two documents map to the same URL path
type CollisionPolicy = Literal["last", "first", "error"]

# Route URL path (e.g., "/", "/guide/setup")
type RoutePath = str

# URL prefix of a content directory ("" for the content root, "/guide" below it)
type BasePath = str

# Parsed front matter block
type FrontMatter = dict[str, str]
