"""
Core pkgtree components.

This package provides the syntax tree node types and the position
bookkeeping that maps tree nodes back to source locations.
"""

from pkgtree.core.nodes import (
    Comment,
    CommentGroup,
    Decl,
    FuncDecl,
    GenDecl,
    ImportSpec,
    PackageTree,
    SourceUnit,
)
from pkgtree.core.positions import NO_POS, FileSet, Position, SourceFile

__all__ = [
    "Comment",
    "CommentGroup",
    "Decl",
    "FuncDecl",
    "GenDecl",
    "ImportSpec",
    "PackageTree",
    "SourceUnit",
    "NO_POS",
    "FileSet",
    "Position",
    "SourceFile",
]
