"""
pkgtree parsing components.

This package provides the tree-sitter backed per-file parser and the
directory loader that groups parsed files by package.
"""

from pkgtree.parsing.loader import (
    FileFilter,
    PackageLoader,
    SourceUnitParser,
    load_packages,
)
from pkgtree.parsing.parser import SourceParser

__all__ = [
    "FileFilter",
    "PackageLoader",
    "SourceUnitParser",
    "load_packages",
    "SourceParser",
]
