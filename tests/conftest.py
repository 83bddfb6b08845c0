"""
Shared test fixtures and utilities for the pkgtree test suite.
"""

from pathlib import Path

import pytest


@pytest.fixture
def write_package(tmp_path):
    """Create a source directory under tmp_path from a filename-to-text mapping.

    Usage:
        def test_something(write_package):
            directory = write_package({"a.go": "package foo"})
    """

    def _write(files: dict[str, str | bytes], name: str = "pkg") -> Path:
        directory = tmp_path / name
        directory.mkdir(parents=True, exist_ok=True)
        for filename, content in files.items():
            path = directory / filename
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return directory

    return _write
