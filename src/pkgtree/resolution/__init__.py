"""
pkgtree path resolution.

This package maps import-style package paths to source directories.
"""

from pkgtree.resolution.path_resolver import (
    MappingResolver,
    PathResolver,
    SourceRootResolver,
    is_local_path,
    validate_import_path,
)

__all__ = [
    "MappingResolver",
    "PathResolver",
    "SourceRootResolver",
    "is_local_path",
    "validate_import_path",
]
