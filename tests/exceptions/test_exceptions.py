"""
Tests for exception types and their messages.
"""

from pkgtree.core.positions import Position
from pkgtree.exceptions import (
    NoMatchingPackageError,
    ParseError,
    PathResolutionError,
    PkgTreeError,
    SelectionError,
    TooManyPackagesError,
)


class TestHierarchy:
    """Tests for the exception hierarchy."""

    def test_all_errors_share_a_base(self):
        """Test every error derives from PkgTreeError."""
        for cls in (PathResolutionError, ParseError, SelectionError):
            assert issubclass(cls, PkgTreeError)

    def test_selection_subtypes(self):
        """Test both selection failures are SelectionErrors."""
        assert issubclass(TooManyPackagesError, SelectionError)
        assert issubclass(NoMatchingPackageError, SelectionError)
        assert not issubclass(TooManyPackagesError, NoMatchingPackageError)


class TestMessages:
    """Tests for error message formatting."""

    def test_path_resolution_error(self):
        """Test the path and reason appear in the message."""
        error = PathResolutionError("example.com/foo", "cannot find package")
        assert str(error) == "Cannot resolve package path 'example.com/foo': cannot find package"

    def test_parse_error(self):
        """Test parse errors lead with file:line:column."""
        error = ParseError("expected ';', found 'bar'", Position("a.go", 12, 1, 13))
        assert str(error) == "a.go:1:13: expected ';', found 'bar'"
        assert error.filename == "a.go"
        assert error.additional_errors == ()

    def test_parse_error_with_additional(self):
        """Test attaching sibling failures keeps the primary error."""
        first = ParseError("first", Position("a.go", 0, 1, 1))
        second = ParseError("second", Position("b.go", 0, 1, 1))
        combined = first.with_additional([second])
        assert combined.message == "first"
        assert combined.additional_errors == (second,)

    def test_too_many_packages(self):
        """Test package names are listed sorted."""
        error = TooManyPackagesError(["foo", "bar"], "production")
        assert str(error) == "More than one production package found in a directory: bar, foo"
        assert error.role == "production"

    def test_no_matching_package(self):
        """Test the message distinguishes empty directories from other packages."""
        assert "found: foo" in str(NoMatchingPackageError("test", ["foo"]))
        assert "no source files" in str(NoMatchingPackageError("test"))
