"""
Package path resolution.

Maps an import-style package path to the directory holding its source files.
The loader only depends on the PathResolver protocol, so callers can inject
any resolver, for example a MappingResolver pointing at temporary directories.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Protocol

from pkgtree.exceptions import PathResolutionError

logger = logging.getLogger(__name__)


class PathResolver(Protocol):
    """Resolves a package path to a source directory."""

    def resolve(self, path: str) -> Path:
        """
        Params:
            path: Import-style package path

        Returns:
            Existing directory containing the package's source files

        Raises:
            PathResolutionError: If the path cannot be resolved
        """
        ...


IMPORT_PATH_PATTERN = re.compile(r"^[\w.~+\-@]+(?:/[\w.~+\-@]+)*$")


def is_local_path(path: str) -> bool:
    """Check whether path is relative to the working directory (``.``, ``./x``, ``../x``)."""
    return path in (".", "..") or path.startswith("./") or path.startswith("../")


def validate_import_path(path: str) -> None:
    """
    Validate the format of a non-local import path.

    Params:
        path: Import path to check

    Raises:
        PathResolutionError: If the path is empty, absolute, or malformed
    """
    if not path:
        raise PathResolutionError(path, "empty package path")
    if path.startswith("/") or Path(path).is_absolute():
        raise PathResolutionError(path, "cannot import absolute path")
    if "\\" in path:
        raise PathResolutionError(path, "invalid character '\\'")
    if not IMPORT_PATH_PATTERN.match(path):
        raise PathResolutionError(path, "malformed import path")
    if any(segment in (".", "..") for segment in path.split("/")):
        raise PathResolutionError(path, "import path must not contain '.' or '..' elements")


class SourceRootResolver:
    """
    Resolves import paths against a list of source roots.

    An import path ``a/b/c`` resolves to the first ``<root>/src/a/b/c`` that
    is a directory. Local paths resolve against the working directory.
    """

    def __init__(self, roots: Iterable[Path | str], working_dir: Path | str | None = None):
        self.roots = [Path(root) for root in roots]
        self.working_dir = Path(working_dir) if working_dir is not None else None

    def resolve(self, path: str) -> Path:
        if is_local_path(path):
            base = self.working_dir if self.working_dir is not None else Path.cwd()
            directory = (base / path).resolve()
            if not directory.is_dir():
                raise PathResolutionError(path, f"directory {directory} does not exist")
            logger.debug("Resolved local path %s to %s", path, directory)
            return directory

        validate_import_path(path)
        searched: list[str] = []
        for root in self.roots:
            candidate = root / "src" / path
            if candidate.is_dir():
                logger.debug("Resolved %s to %s", path, candidate)
                return candidate
            searched.append(str(candidate))

        if not searched:
            raise PathResolutionError(path, "no source roots configured")
        raise PathResolutionError(path, f"cannot find package (searched {', '.join(searched)})")


class MappingResolver:
    """Resolves package paths from an explicit path-to-directory mapping."""

    def __init__(self, mapping: Mapping[str, Path | str]):
        self.mapping = {key: Path(value) for key, value in mapping.items()}

    def resolve(self, path: str) -> Path:
        if path not in self.mapping:
            raise PathResolutionError(path, "unknown package path")
        directory = self.mapping[path]
        if not directory.is_dir():
            raise PathResolutionError(path, f"directory {directory} does not exist")
        return directory
