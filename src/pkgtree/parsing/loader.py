"""
Directory loading: parse every source file of one directory and group the
resulting units by declared package name.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from pkgtree.config import LoaderConfig
from pkgtree.core.nodes import PackageTree, SourceUnit
from pkgtree.core.positions import FileSet, Position
from pkgtree.exceptions import ParseError, PathResolutionError
from pkgtree.parsing.parser import SourceParser

logger = logging.getLogger(__name__)

FileFilter = Callable[[Path], bool]


class SourceUnitParser(Protocol):
    """Anything that can turn one file's text into a SourceUnit."""

    def parse_file(self, filename: str, source: str, file_set: FileSet) -> SourceUnit: ...


class PackageLoader:
    """
    Loads all packages declared in a single directory.

    Loading is all-or-nothing: if any file fails to parse, no packages are
    returned. Subdirectories are not visited.
    """

    def __init__(
        self,
        parser: SourceUnitParser | None = None,
        config: LoaderConfig | None = None,
        file_filter: FileFilter | None = None,
    ):
        """
        Params:
            parser: Per-file parser; defaults to SourceParser
            config: Suffix and encoding settings
            file_filter: Optional predicate restricting which source files are parsed
        """
        self.parser = parser or SourceParser()
        self.config = config or LoaderConfig()
        self.file_filter = file_filter

    def source_files(self, directory: Path) -> list[Path]:
        """Source files directly inside ``directory``, sorted by name."""
        files = [
            path
            for path in directory.iterdir()
            if path.is_file() and path.name.endswith(self.config.source_suffix)
        ]
        if self.file_filter is not None:
            files = [path for path in files if self.file_filter(path)]
        return sorted(files, key=lambda path: path.name)

    def load(self, directory: Path | str) -> dict[str, PackageTree]:
        """
        Parse a directory into one PackageTree per declared package name.

        Params:
            directory: Directory to load

        Returns:
            Mapping of package name to PackageTree; empty if there are no source files

        Raises:
            PathResolutionError: If ``directory`` is not a directory
            ParseError: If any source file fails to parse; the first failure is
                raised and the others are attached as ``additional_errors``
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise PathResolutionError(str(directory), "not a directory")

        file_set = FileSet()
        packages: dict[str, PackageTree] = {}
        errors: list[ParseError] = []

        for path in self.source_files(directory):
            try:
                unit = self._parse(path, file_set)
            except ParseError as e:
                logger.warning("Failed to parse %s", e)
                errors.append(e)
                continue
            tree = packages.get(unit.package_name)
            if tree is None:
                tree = PackageTree(unit.package_name, directory, file_set)
                packages[unit.package_name] = tree
            tree.add(unit)

        if errors:
            raise errors[0].with_additional(errors[1:])

        logger.debug(
            "Loaded %d package(s) from %s: %s",
            len(packages),
            directory,
            ", ".join(sorted(packages)) or "<none>",
        )
        return packages

    def _parse(self, path: Path, file_set: FileSet) -> SourceUnit:
        try:
            source = path.read_text(encoding=self.config.encoding)
        except UnicodeDecodeError as e:
            raise ParseError(
                f"invalid {self.config.encoding} encoding: {e.reason}",
                self._decode_error_position(str(path), e),
            ) from e
        return self.parser.parse_file(str(path), source, file_set)

    def _decode_error_position(self, filename: str, error: UnicodeDecodeError) -> Position:
        """Line and column of the first byte that failed to decode."""
        # Everything before error.start decoded cleanly.
        prefix = error.object[: error.start].decode(self.config.encoding, errors="replace")
        line_start = prefix.rfind("\n") + 1
        return Position(
            filename=filename,
            offset=len(prefix),
            line=prefix.count("\n") + 1,
            column=len(prefix) - line_start + 1,
        )


def load_packages(
    directory: Path | str,
    config: LoaderConfig | None = None,
    file_filter: FileFilter | None = None,
) -> dict[str, PackageTree]:
    """
    Convenience function to load a directory with the default parser.

    Params:
        directory: Directory to load
        config: Optional loader settings
        file_filter: Optional predicate restricting which source files are parsed

    Returns:
        Mapping of package name to PackageTree
    """
    loader = PackageLoader(config=config, file_filter=file_filter)
    return loader.load(directory)
