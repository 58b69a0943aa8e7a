"""Whisker error hierarchy.

All whisker-specific errors inherit from WhiskerError for easy catching.
"""


class WhiskerError(Exception):
    """Base error for all whisker operations."""


class ConfigError(WhiskerError):
    """Invalid or missing configuration."""


class ContentError(WhiskerError):
    """Content could not be loaded (missing root, unreadable document)."""


class RouteCollisionError(ContentError):
    """Two documents resolved to the same URL path."""


class ExportError(WhiskerError):
    """Error during static export."""
