"""
Tests for package path resolution.
"""

import pytest

from pkgtree.exceptions import PathResolutionError
from pkgtree.resolution.path_resolver import (
    MappingResolver,
    SourceRootResolver,
    is_local_path,
    validate_import_path,
)


class TestImportPathValidation:
    """Tests for import path format checks."""

    @pytest.mark.parametrize(
        "path",
        ["fmt", "example.com/foo", "github.com/user/repo/v2", "golang.org/x/tools@latest"],
    )
    def test_valid_paths(self, path):
        """Test well-formed import paths are accepted."""
        validate_import_path(path)

    @pytest.mark.parametrize(
        "path,reason",
        [
            ("", "empty package path"),
            ("/abs/path", "cannot import absolute path"),
            ("a\\b", "invalid character"),
            ("a b", "malformed import path"),
            ("a//b", "malformed import path"),
            ("a/", "malformed import path"),
            ("a/../b", "must not contain"),
            ("a/./b", "must not contain"),
        ],
    )
    def test_invalid_paths(self, path, reason):
        """Test malformed import paths are rejected with a reason."""
        with pytest.raises(PathResolutionError) as exc_info:
            validate_import_path(path)
        assert reason in exc_info.value.reason
        assert exc_info.value.path == path

    @pytest.mark.parametrize(
        "path,expected",
        [(".", True), ("..", True), ("./pkg", True), ("../pkg", True), ("pkg", False), (".pkg", False)],
    )
    def test_is_local_path(self, path, expected):
        """Test detection of working-directory relative paths."""
        assert is_local_path(path) is expected


class TestSourceRootResolver:
    """Tests for resolution against source roots."""

    def test_resolves_under_src(self, tmp_path):
        """Test an import path resolves to <root>/src/<path>."""
        target = tmp_path / "src" / "example.com" / "foo"
        target.mkdir(parents=True)
        resolver = SourceRootResolver([tmp_path])
        assert resolver.resolve("example.com/foo") == target

    def test_roots_are_searched_in_order(self, tmp_path):
        """Test the first root containing the package wins."""
        first, second = tmp_path / "first", tmp_path / "second"
        (second / "src" / "foo").mkdir(parents=True)
        resolver = SourceRootResolver([first, second])
        assert resolver.resolve("foo") == second / "src" / "foo"

        (first / "src" / "foo").mkdir(parents=True)
        assert resolver.resolve("foo") == first / "src" / "foo"

    def test_missing_package(self, tmp_path):
        """Test an unknown import path lists the searched locations."""
        resolver = SourceRootResolver([tmp_path])
        with pytest.raises(PathResolutionError) as exc_info:
            resolver.resolve("example.com/missing")
        assert "cannot find package" in str(exc_info.value)
        assert "example.com" in str(exc_info.value)

    def test_file_is_not_a_package(self, tmp_path):
        """Test a regular file at the package location does not resolve."""
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "foo").write_text("package foo")
        with pytest.raises(PathResolutionError):
            SourceRootResolver([tmp_path]).resolve("foo")

    def test_no_roots(self):
        """Test import paths cannot resolve without source roots."""
        with pytest.raises(PathResolutionError, match="no source roots configured"):
            SourceRootResolver([]).resolve("foo")

    def test_invalid_path_fails_before_lookup(self, tmp_path):
        """Test malformed paths are rejected even when roots exist."""
        with pytest.raises(PathResolutionError, match="absolute"):
            SourceRootResolver([tmp_path]).resolve("/etc")

    def test_local_path(self, tmp_path):
        """Test local paths resolve against the working directory."""
        (tmp_path / "pkg").mkdir()
        resolver = SourceRootResolver([], working_dir=tmp_path)
        assert resolver.resolve("./pkg") == (tmp_path / "pkg").resolve()
        assert resolver.resolve(".") == tmp_path.resolve()

    def test_local_path_defaults_to_cwd(self, tmp_path, monkeypatch):
        """Test local paths use the process working directory by default."""
        (tmp_path / "pkg").mkdir()
        monkeypatch.chdir(tmp_path)
        assert SourceRootResolver([]).resolve("./pkg") == (tmp_path / "pkg").resolve()

    def test_missing_local_path(self, tmp_path):
        """Test a local path to a missing directory fails."""
        with pytest.raises(PathResolutionError, match="does not exist"):
            SourceRootResolver([], working_dir=tmp_path).resolve("./missing")


class TestMappingResolver:
    """Tests for explicit path mappings."""

    def test_resolves_mapped_path(self, tmp_path):
        """Test a mapped path resolves to its directory."""
        resolver = MappingResolver({"example.com/foo": tmp_path})
        assert resolver.resolve("example.com/foo") == tmp_path

    def test_unknown_path(self, tmp_path):
        """Test an unmapped path fails."""
        with pytest.raises(PathResolutionError, match="unknown package path"):
            MappingResolver({"a": tmp_path}).resolve("b")

    def test_mapped_directory_must_exist(self, tmp_path):
        """Test a mapping to a missing directory fails."""
        with pytest.raises(PathResolutionError, match="does not exist"):
            MappingResolver({"a": tmp_path / "missing"}).resolve("a")
