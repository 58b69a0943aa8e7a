"""Tests for whisker._errors."""

import pytest

from whisker._errors import (
    ConfigError,
    ContentError,
    ExportError,
    RouteCollisionError,
    WhiskerError,
)


class TestErrorHierarchy:
    """All whisker errors inherit from WhiskerError."""

    def test_whisker_error_is_exception(self) -> None:
        assert issubclass(WhiskerError, Exception)

    @pytest.mark.parametrize(
        "error_cls", [ConfigError, ContentError, ExportError, RouteCollisionError],
    )
    def test_catchable_as_whisker_error(self, error_cls: type[WhiskerError]) -> None:
        with pytest.raises(WhiskerError):
            raise error_cls("test")

    def test_collision_is_content_error(self) -> None:
        assert issubclass(RouteCollisionError, ContentError)
