"""Tests for perch.errors — exception hierarchy."""

from perch.errors import (
    ConfigurationError,
    ExportError,
    PerchError,
    RouteConflictError,
)


class TestErrorHierarchy:
    def test_configuration_error_is_perch_error(self) -> None:
        assert issubclass(ConfigurationError, PerchError)

    def test_route_conflict_is_configuration_error(self) -> None:
        assert issubclass(RouteConflictError, ConfigurationError)

    def test_export_error_is_perch_error(self) -> None:
        assert issubclass(ExportError, PerchError)


class TestRouteConflictError:
    def test_with_paths(self) -> None:
        err = RouteConflictError("Conflicting dynamic segments", ("a/[id].html", "a/[slug]"))
        assert err.detail == "Conflicting dynamic segments"
        assert err.paths == ("a/[id].html", "a/[slug]")
        assert str(err) == "Conflicting dynamic segments: a/[id].html, a/[slug]"

    def test_without_paths(self) -> None:
        err = RouteConflictError("Bad tree")
        assert err.paths == ()
        assert str(err) == "Bad tree"
