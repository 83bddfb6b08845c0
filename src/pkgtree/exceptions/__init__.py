"""
pkgtree exception classes.

This package provides all exception types raised while resolving, parsing
and selecting packages.
"""

from pkgtree.exceptions.core import (
    NoMatchingPackageError,
    ParseError,
    PathResolutionError,
    PkgTreeError,
    SelectionError,
    TooManyPackagesError,
)

__all__ = [
    "PkgTreeError",
    "PathResolutionError",
    "ParseError",
    "SelectionError",
    "TooManyPackagesError",
    "NoMatchingPackageError",
]
